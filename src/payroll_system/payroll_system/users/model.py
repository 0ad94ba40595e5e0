from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: administrator account.

    Note: plain data object, no DB access code here.
    """

    user_id: int
    username: str
    password_hash: str
    role: Role
    created_at: Optional[datetime] = None
