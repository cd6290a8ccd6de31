"""
Roles Configuration
Defines the three fixed user roles and how each one is presented and routed.
Used by the route guard, the login redirect and the dashboards' display fields.
"""

ADMIN = "admin"
ORGANIZER = "organizer"
PARTICIPANT = "participant"

ROLES = {
    ADMIN: {
        "label": "Administrador",
        "badge_variant": "destructive",
        "dashboard": "/dashboard/admin",
    },
    ORGANIZER: {
        "label": "Organizador",
        "badge_variant": "default",
        "dashboard": "/dashboard/organizer",
    },
    PARTICIPANT: {
        "label": "Participante",
        "badge_variant": "secondary",
        "dashboard": "/dashboard/participant",
    },
}

# Options offered on the registration page, in display order
REGISTRATION_ROLE_OPTIONS = [PARTICIPANT, ORGANIZER, ADMIN]

UNKNOWN_ROLE_BADGE = "outline"
HOME_PATH = "/"
LOGIN_PATH = "/login"
