# Supabase table: plans
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- name: text (not null)
- max_events: integer (not null) - maximum events an organizer may create, -1 for unlimited
- price: numeric (not null)
- created_at: timestamp (default: now())

users.plan_id references this table. Deleting a plan still referenced by an
organizer is left to the database's foreign key behavior.
"""
