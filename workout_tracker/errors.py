# -*- coding: utf-8 -*-
"""Domain errors shared by the storage and manager layers."""

from __future__ import annotations


class WorkoutError(Exception):
    """Base class for errors raised by the workout tracker core."""


class ValidationError(WorkoutError):
    """A required field is missing or empty. Nothing was written."""


class NotFoundError(WorkoutError):
    """The operation needs a document that does not exist yet."""


class StorageReadError(WorkoutError):
    """A stored document exists but could not be read or parsed."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"failed to read {name}: {reason}")
        self.name = name
        self.reason = reason


class StorageWriteError(WorkoutError):
    """A document could not be durably written."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"failed to write {name}: {reason}")
        self.name = name
        self.reason = reason
