"""
Core dependencies for route protection
"""

from fastapi import Depends, Request, Response
from eventflow.config import settings
from eventflow.config.roles_config import ROLES, HOME_PATH
from eventflow.core.session import SessionStore, SessionUser, CookieStorage
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


class LoginRequired(Exception):
    """Raised by the route guard; the app answers with a redirect to the login page."""

    def __init__(self, reason: str, clear_session: bool = False):
        super().__init__(reason)
        self.reason = reason
        self.clear_session = clear_session


def get_session_store(request: Request, response: Response) -> SessionStore:
    return SessionStore(CookieStorage(request, response), key=settings.session_cookie_name)


def get_optional_user(store: SessionStore = Depends(get_session_store)) -> Optional[SessionUser]:
    """Current session user for public pages (navbar); None when logged out."""
    return store.load()


def dashboard_path(role: str) -> str:
    config = ROLES.get(role)
    return config["dashboard"] if config else HOME_PATH


def require_role(allowed_roles: Optional[List[str]] = None):
    """Factory function to create the route guard dependency.

    A missing session and a role outside allowed_roles both redirect to the
    login page. allowed_roles=None admits any logged-in user; an empty list
    admits nobody. This is a client-side gate only: the Supabase tables are not
    protected by it.
    """
    def guard(store: SessionStore = Depends(get_session_store)) -> SessionUser:
        had_record = store.has_record()
        user = store.load()
        if user is None:
            raise LoginRequired("No session", clear_session=had_record)
        if allowed_roles is not None and user.role not in allowed_roles:
            logger.info(f"User {user.id} with role {user.role} denied, requires {allowed_roles}")
            raise LoginRequired(f"Role {user.role} not allowed")
        return user
    return guard
