from __future__ import annotations

import threading
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import is_valid_string, require_min_length, require_non_empty
from ..core.constants import PASSWORD_MIN_LENGTH, USERNAME_MAX_LENGTH, USERNAME_MIN_LENGTH
from ..core.enums import ErrorKind, Role
from ..core.exceptions import AuthenticationError, FieldError, RegistrationClosedError, ValidationError
from .repository import UserRepository


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    username: str
    role: Role

    def to_dict(self) -> dict:
        return {"id": self.user_id, "username": self.username, "role": self.role.value}


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        username = (username or "").strip()
        if not username or not password:
            raise ValidationError("Username and password are required")

        user = self._users.get_by_username(username)
        if not user:
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Invalid username or password")

        return SessionUser(user_id=user.user_id, username=user.username, role=user.role)


class RegistrationGate:
    """Process-wide switch: once an administrator exists, registration stays closed.

    The lock serializes registrations inside one process; the unique
    ``admin_slot`` column closes the race across processes.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def refresh(self, users: UserRepository) -> bool:
        """Close the gate if storage already has a user; return whether it is open."""
        if not self._closed and users.any_exists():
            self._closed = True
        return not self._closed

    def close(self) -> None:
        self._closed = True

    @property
    def lock(self) -> threading.Lock:
        return self._lock


class RegistrationService:
    """Use case: create the one and only administrator."""

    def __init__(self, users: UserRepository, gate: RegistrationGate):
        self._users = users
        self._gate = gate

    def registration_open(self) -> bool:
        return self._gate.refresh(self._users)

    def register_admin(self, *, username: str, password: str) -> int:
        with self._gate.lock:
            if not self._gate.refresh(self._users):
                raise RegistrationClosedError("Admin already exists. Registration is disabled.")

            username = require_non_empty(username, "Username")
            if not is_valid_string(username, USERNAME_MIN_LENGTH, USERNAME_MAX_LENGTH):
                raise ValidationError.from_errors(
                    [
                        FieldError(
                            "username",
                            ErrorKind.INVALID_FORMAT,
                            f"Username must be {USERNAME_MIN_LENGTH}-{USERNAME_MAX_LENGTH} characters",
                            username,
                        )
                    ]
                )
            require_min_length(password, "Password", PASSWORD_MIN_LENGTH)

            try:
                user_id = self._users.create_admin(username=username, password_hash=generate_password_hash(password))
            except RegistrationClosedError:
                self._gate.close()
                raise

            self._gate.close()
            return user_id
