# -*- coding: utf-8 -*-
"""Comments — per-user ``comments`` document, append-only per session key."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..errors import ValidationError
from ..store import DocumentStore

KIND = "comments"


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def split_session_key(key: str) -> tuple[str, str]:
    # Only the first "_" separates the date; tab names may contain more.
    date, _, menu = key.partition("_")
    return date, menu


class CommentLog:
    def __init__(self, store: DocumentStore, *, anonymous_author: str = "anonymous") -> None:
        self.store = store
        self.anonymous_author = anonymous_author

    def get_comments(self, user: str) -> Dict[str, List[Dict[str, Any]]]:
        data = self.store.load(KIND, user, fallback={})
        return data if isinstance(data, dict) else {}

    def add_comment(
        self,
        user: str,
        key: Optional[str],
        text: Optional[str],
        author: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        if not key or not text:
            raise ValidationError("key and text required")
        comments = self.get_comments(user)
        thread = comments.setdefault(key, [])
        thread.append({"author": author or self.anonymous_author, "text": text, "time": _utc_now()})
        self.store.save(KIND, user, comments)
        return thread
