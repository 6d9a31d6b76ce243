"""Domain entity representing an account."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Account:
    """Actor that can receive or cause notifications."""

    id: int | None
    username: str
    display_name: str = ""
    domain: str | None = None
    updated_at: datetime | None = None


__all__ = ["Account"]
