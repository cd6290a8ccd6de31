# Session-based login against the application "users" table
# No Supabase Auth involved:
# - Registration inserts a row in users (see users/models.py)
# - Login looks the row up by email and stores it as the session record
# - Logout clears the session record

"""
The session record is the users row as read at login time, stored under the
"eventflow_user" cookie (see core/session.py). It is not refreshed: changes
to the row (deactivation, plan change) only show up after the next login.
"""
