# -*- coding: utf-8 -*-
"""User registry — one shared ``users`` document."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..errors import ValidationError
from ..store import DocumentStore, normalize_user

logger = logging.getLogger(__name__)

KIND = "users"


class UserRegistryManager:
    def __init__(self, store: DocumentStore, *, default_users: List[str], default_current: str) -> None:
        self.store = store
        self.default_users = list(default_users)
        self.default_current = default_current

    def _default(self) -> Dict[str, Any]:
        return {"users": list(self.default_users), "current": self.default_current}

    def list_users(self) -> Dict[str, Any]:
        data = self.store.load(KIND, fallback=self._default())
        if not isinstance(data, dict):
            return self._default()
        data.setdefault("users", [])
        data.setdefault("current", self.default_current)
        return data

    def register_user(self, name: Optional[str]) -> Dict[str, Any]:
        """Add ``name`` (uppercased) unless it is already registered.

        The registry is written back in full either way.
        """
        upper = normalize_user(name or "")
        if not upper:
            raise ValidationError("name required")
        data = self.list_users()
        if upper not in data["users"]:
            data["users"].append(upper)
            logger.info("Registered user %s", upper)
        self.store.save(KIND, None, data)
        return data
