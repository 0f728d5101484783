# -*- coding: utf-8 -*-
"""Sync snapshot — menus + comments + measurements in one response for polling clients."""

from __future__ import annotations

import time
from typing import Any, Dict

from ..comments.storage import CommentLog
from ..measurements.storage import MeasurementLedger
from ..menus.storage import MenuManager


def _epoch_ms() -> int:
    return int(time.time() * 1000)


class SyncAggregator:
    """Read-only composition of the three per-user documents.

    Each document is read independently, so a snapshot taken while another
    client is writing may mix old and new state. Clients replace their whole
    local state with every response.
    """

    def __init__(self, menus: MenuManager, comments: CommentLog, measurements: MeasurementLedger) -> None:
        self.menus = menus
        self.comments = comments
        self.measurements = measurements

    def sync(self, user: str) -> Dict[str, Any]:
        return {
            "menus": self.menus.get_menus(user),
            "comments": self.comments.get_comments(user),
            "measurements": self.measurements.list_entries(user),
            "serverTime": _epoch_ms(),
        }
