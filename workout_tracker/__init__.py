# -*- coding: utf-8 -*-
"""
Workout tracker backend

Per-user JSON documents for workout menus, session comments and body
measurements, served to polling trainer/trainee clients.
"""

from .store import DocumentStore, FileDocumentStore, MemoryDocumentStore

__all__ = [
    'DocumentStore',
    'FileDocumentStore',
    'MemoryDocumentStore',
]
