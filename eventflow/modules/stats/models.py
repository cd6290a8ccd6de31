# Supabase functions: get_platform_stats, get_organizer_stats
# Both are called through supabase.rpc(); their SQL lives in the database.

"""
get_platform_stats() returns json:
- total_users, total_organizers, total_participants: integer
- total_events, active_events: integer
- total_registrations: integer (tickets)
- total_revenue: numeric (sum of event price per ticket)

get_organizer_stats(organizer_user_id uuid) returns json:
- total_events, active_events: integer (events of that organizer)
- total_participants: integer (tickets on those events)
- total_revenue: numeric
"""
