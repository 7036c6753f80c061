"""Repo de usuarios en memoria. El username es único."""
import threading
from typing import Any, Dict, Optional
from uuid import uuid4

from argon2 import PasswordHasher
from argon2.low_level import Type

from studynotes.core.exceptions import ConflictError


ph = PasswordHasher(time_cost=2, memory_cost=51200, parallelism=2, hash_len=32, salt_len=16, type=Type.ID)


def hash_password(password: str) -> str:
    return ph.hash(password)


class UserRepository:
    def __init__(self) -> None:
        self._users: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def get_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            u = self._users.get(user_id)
            return dict(u) if u else None

    def get_user_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            return self._find(username)

    def _find(self, username: str) -> Optional[Dict[str, Any]]:
        for u in self._users.values():
            if u["username"] == username:
                return dict(u)
        return None

    def insert_user(self, username: str, password: str) -> Dict[str, Any]:
        """Crea usuario con password hasheado (argon2). ConflictError si el username existe."""
        password_hash = hash_password(password)
        with self._lock:
            if self._find(username) is not None:
                raise ConflictError("Username already exists")
            user = {"id": str(uuid4()), "username": username, "password_hash": password_hash}
            self._users[user["id"]] = user
            return dict(user)
