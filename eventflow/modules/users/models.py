# Supabase table: users
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

users:
- id: uuid (primary key, default: gen_random_uuid())
- name: text (not null)
- email: text (unique, not null)
- role: text (not null) - values: admin, organizer, participant
- active: boolean (not null, default: true)
- plan_id: uuid (foreign key to plans.id, nullable) - set for organizers only
- created_at: timestamp (default: now())

Note: this is an application table, not Supabase Auth's auth.users.
No password is stored; login matches the email only.
"""
