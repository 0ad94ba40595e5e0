from __future__ import annotations

from typing import Optional, Protocol

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def any_exists(self) -> bool:
        raise NotImplementedError

    def create_admin(self, *, username: str, password_hash: str) -> int:
        """Insert the administrator row.

        Must raise RegistrationClosedError when the storage already holds one.
        """
        raise NotImplementedError
