"""
Display helpers shared by the dashboards: labels, badge variants, currency and dates (pt-BR).
"""

import math
from datetime import datetime
from typing import Optional, Union

from eventflow.config.roles_config import ROLES, UNKNOWN_ROLE_BADGE

ACTIVE = "active"
INACTIVE = "inactive"


def role_label(role: str) -> str:
    config = ROLES.get(role)
    return config["label"] if config else role


def role_badge_variant(role: str) -> str:
    config = ROLES.get(role)
    return config["badge_variant"] if config else UNKNOWN_ROLE_BADGE


def status_label(active: bool) -> str:
    return "Ativo" if active else "Inativo"


def status_badge_variant(active: bool) -> str:
    return "default" if active else "secondary"


def toggle_label(active: bool) -> str:
    """Label of the button that flips the current state."""
    return "Desativar" if active else "Ativar"


def toggled_status(status: str) -> str:
    return INACTIVE if status == ACTIVE else ACTIVE


def format_currency(value: Optional[float]) -> str:
    return f"R$ {float(value or 0):.2f}"


def max_events_label(max_events: int) -> str:
    return "Ilimitado" if max_events == -1 else f"{max_events} eventos"


def plan_option_label(name: str, max_events: int, price: float) -> str:
    return f"{name} - {max_events_label(max_events)} - {format_currency(price)}"


def _as_datetime(value: Union[datetime, str, None]) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def format_date(value: Union[datetime, str, None]) -> str:
    value = _as_datetime(value)
    return value.strftime("%d/%m/%Y") if value else ""


def format_datetime(value: Union[datetime, str, None]) -> str:
    value = _as_datetime(value)
    return value.strftime("%d/%m/%Y, %H:%M") if value else ""


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def percentage(part: int, total: int) -> int:
    return round_half_up(part / total * 100) if total > 0 else 0
