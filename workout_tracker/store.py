# -*- coding: utf-8 -*-
"""Document store — load/save one named JSON document at a time.

Every higher component goes through ``DocumentStore``. Documents are always
written whole; there is no merge, no locking and no transaction spanning a
caller's read-modify-write cycle, so two interleaved writers to the same
document can lose an update.
"""

from __future__ import annotations

import copy
import hashlib
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import quote
from uuid import uuid4

from .errors import StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)


def normalize_user(user: str) -> str:
    return (user or "").strip().upper()


_MAX_KEY_LEN = 120


def _safe_key(value: str) -> str:
    """Encode ``value`` as a single file-name segment, one-to-one.

    Percent-encoding leaves only ``[A-Za-z0-9_.~-]`` and ``%``; ``%`` is then
    written as ``@``, which the encoding never emits on its own. Long keys
    keep a prefix plus a digest of the full encoding.
    """
    encoded = quote(value, safe="").replace("%", "@")
    if len(encoded) > _MAX_KEY_LEN:
        digest = hashlib.sha256(encoded.encode("ascii")).hexdigest()[:16]
        encoded = f"{encoded[:_MAX_KEY_LEN]}~{digest}"
    return encoded


def document_name(kind: str, user: Optional[str] = None) -> str:
    if user is None:
        return kind
    return f"{kind}_{_safe_key(normalize_user(user))}"


class DocumentStore:
    """Storage port: whole-document load/save keyed by (kind, user)."""

    def load(self, kind: str, user: Optional[str] = None, *, fallback: Any = None) -> Any:
        name = document_name(kind, user)
        try:
            raw = self._read(name)
        except StorageReadError as exc:
            logger.warning("%s; using fallback", exc)
            return copy.deepcopy(fallback)
        if raw is None:
            return copy.deepcopy(fallback)
        try:
            return json.loads(raw)
        except ValueError as exc:
            logger.warning("%s; using fallback", StorageReadError(name, str(exc)))
            return copy.deepcopy(fallback)

    def save(self, kind: str, user: Optional[str], document: Any) -> None:
        name = document_name(kind, user)
        try:
            text = json.dumps(document, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as exc:
            logger.error("Cannot serialize %s: %s", name, exc)
            raise StorageWriteError(name, str(exc)) from exc
        self._write(name, text)

    def _read(self, name: str) -> Optional[str]:
        """Return the raw text of ``name`` or None when it does not exist."""
        raise NotImplementedError

    def _write(self, name: str, text: str) -> None:
        raise NotImplementedError


class MemoryDocumentStore(DocumentStore):
    """Keeps serialized JSON text in a dict. Used by tests and demos."""

    def __init__(self) -> None:
        self.documents: Dict[str, str] = {}

    def _read(self, name: str) -> Optional[str]:
        return self.documents.get(name)

    def _write(self, name: str, text: str) -> None:
        self.documents[name] = text


class FileDocumentStore(DocumentStore):
    """One ``<name>.json`` file per document under ``root``."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def _path(self, name: str) -> Path:
        return self.root / f"{name}.json"

    def _read(self, name: str) -> Optional[str]:
        fp = self._path(name)
        if not fp.exists():
            return None
        try:
            return fp.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageReadError(name, str(exc)) from exc

    def _write(self, name: str, text: str) -> None:
        fp = self._path(name)
        # Replace atomically so a concurrent reader never sees a truncated file.
        tmp = fp.with_name(f".{fp.name}.{uuid4().hex}.tmp")
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            tmp.write_text(text, encoding="utf-8")
            os.replace(tmp, fp)
        except OSError as exc:
            logger.error("Failed to write %s: %s", fp, exc)
            try:
                tmp.unlink()
            except OSError:
                pass
            raise StorageWriteError(name, str(exc)) from exc


def create_store(backend: str, data_root: Path) -> DocumentStore:
    if backend == "memory":
        return MemoryDocumentStore()
    if backend == "file":
        return FileDocumentStore(data_root)
    raise ValueError(f"Unknown store backend: {backend!r} (expected 'file' or 'memory')")
