# Supabase table: events
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- title: text (not null)
- description: text (nullable)
- price: numeric (not null, default: 0)
- status: text (not null, default: 'active') - values: active, inactive
- type_id: uuid (foreign key to event_types.id)
- organizer_id: uuid (foreign key to users.id, not null)
- created_at: timestamp (default: now())

Only active events are listed to participants. Deletion is a hard delete;
tickets of a deleted event follow the database's foreign key behavior.
"""
