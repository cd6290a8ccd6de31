# Supabase table: event_types
# Flat lookup list used to categorize events (conference, workshop, ...)

"""
Expected Supabase table structure:
- id: uuid (primary key)
- name: text (unique, not null)
"""
