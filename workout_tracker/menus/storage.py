# -*- coding: utf-8 -*-
"""Menus — per-user ``menus`` document (tab name -> exercises)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..errors import NotFoundError, ValidationError
from ..store import DocumentStore

KIND = "menus"


class MenuManager:
    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    def get_menus(self, user: str) -> Optional[Dict[str, Any]]:
        """Return the stored menus, or None if the user never saved any.

        None tells clients to fall back to their built-in default menus; an
        empty dict means the user deliberately has no tabs.
        """
        return self.store.load(KIND, user, fallback=None)

    def replace_menus(self, user: str, menus: Optional[Dict[str, Any]]) -> None:
        if menus is None:
            raise ValidationError("menus required")
        self.store.save(KIND, user, menus)

    def patch_tab(self, user: str, tab: str, exercises: Optional[List[Any]]) -> Dict[str, Any]:
        if exercises is None:
            raise ValidationError("exercises required")
        menus = self.get_menus(user)
        if not isinstance(menus, dict):
            # A stored non-mapping has no tabs to patch; only a full replace can fix it.
            raise NotFoundError("no data yet")
        menus[tab] = exercises
        self.store.save(KIND, user, menus)
        return menus
