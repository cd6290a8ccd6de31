"""
Session store for the logged-in user.

The whole user record is kept client-side under a single key (a cookie in
production). It is serialized as JSON and base64-encoded so it survives as a
cookie value. There is no signature and no expiry: whatever decodes into a
valid record is trusted by every consumer.
"""

import base64
import json
import logging
from collections.abc import MutableMapping
from datetime import datetime
from typing import Any, Dict, Iterator, Optional, Union

from fastapi import Request, Response
from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_SESSION_KEY = "eventflow_user"


class SessionUser(BaseModel):
    id: str
    name: str
    email: str
    role: str
    plan_id: Optional[str] = None
    active: Optional[bool] = None
    created_at: Optional[datetime] = None


def encode_session(user: Union[SessionUser, Dict[str, Any]]) -> str:
    if isinstance(user, BaseModel):
        payload = user.model_dump_json()
    else:
        payload = json.dumps(user, default=str)
    return base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii")


def decode_session(value: str) -> SessionUser:
    """Raises ValueError when the stored value is not a user record."""
    raw = base64.urlsafe_b64decode(value.encode("ascii"))
    return SessionUser(**json.loads(raw.decode("utf-8")))


class SessionStore:
    def __init__(self, storage: MutableMapping, key: str = DEFAULT_SESSION_KEY):
        self.storage = storage
        self.key = key

    def has_record(self) -> bool:
        return self.key in self.storage

    def save(self, user: Union[SessionUser, Dict[str, Any]]) -> None:
        self.storage[self.key] = encode_session(user)

    def load(self) -> Optional[SessionUser]:
        value = self.storage.get(self.key)
        if not value:
            return None
        try:
            return decode_session(value)
        except (ValueError, TypeError) as e:
            logger.warning(f"Discarding malformed session record: {e}")
            self.clear()
            return None

    def clear(self) -> None:
        self.storage.pop(self.key, None)


class CookieStorage(MutableMapping):
    """Reads from the request cookies, writes and deletes through the response."""

    def __init__(self, request: Request, response: Response):
        self._values = dict(request.cookies)
        self.response = response

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._values[key] = value
        self.response.set_cookie(key, value, httponly=True, samesite="lax")

    def __delitem__(self, key: str) -> None:
        del self._values[key]
        self.response.delete_cookie(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)
