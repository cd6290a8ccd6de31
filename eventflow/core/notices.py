"""
Toast-style notices returned to the client.

Every action answers with a Notice on success. Every failure is raised as an
HTTPException whose detail carries the same {title, description} shape, so the
client shows both the same way.
"""

from fastapi import HTTPException
from pydantic import BaseModel
from typing import Optional


class Notice(BaseModel):
    title: str
    description: Optional[str] = None


def error_message(exc: Exception) -> str:
    """Backend-supplied message when there is one (postgrest APIError.message), else str(exc)."""
    message = getattr(exc, "message", None)
    if message:
        return str(message)
    return str(exc)


def notice_error(status_code: int, title: str, description: Optional[str] = None) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={"title": title, "description": description},
    )
