"""
Reference Data Configuration
Default plans and event types loaded by the seed script.
Can be run manually on a fresh Supabase project or after a reset.
"""

# max_events = -1 means unlimited
DEFAULT_PLANS = [
    {"name": "Básico", "max_events": 3, "price": 0.0},
    {"name": "Profissional", "max_events": 20, "price": 49.9},
    {"name": "Premium", "max_events": -1, "price": 149.9},
]

DEFAULT_EVENT_TYPES = [
    "Conferência",
    "Workshop",
    "Meetup",
    "Show",
    "Curso",
]
