# Supabase table: tickets
# Join table between events and participants; a row means "registered"

"""
Expected Supabase table structure:
- id: uuid (primary key)
- event_id: uuid (foreign key to events.id, not null)
- participant_id: uuid (foreign key to users.id, not null)
- created_at: timestamp (default: now())

Recommended: unique (event_id, participant_id). The service checks for an
existing ticket before inserting, which leaves a window for duplicates
unless the database enforces the constraint.
"""
