# -*- coding: utf-8 -*-
"""Service wiring — one set of managers per app, built around an injected store."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request

from .comments.storage import CommentLog
from .config import Settings
from .export.generator import WorkoutExporter
from .measurements.storage import MeasurementLedger
from .menus.storage import MenuManager
from .store import DocumentStore
from .sync.storage import SyncAggregator
from .users.storage import UserRegistryManager


@dataclass
class Services:
    store: DocumentStore
    users: UserRegistryManager
    menus: MenuManager
    comments: CommentLog
    measurements: MeasurementLedger
    sync: SyncAggregator
    exporter: WorkoutExporter


def build_services(store: DocumentStore, settings: Settings) -> Services:
    menus = MenuManager(store)
    comments = CommentLog(store, anonymous_author=settings.anonymous_author)
    measurements = MeasurementLedger(store)
    return Services(
        store=store,
        users=UserRegistryManager(
            store,
            default_users=settings.default_users,
            default_current=settings.default_current,
        ),
        menus=menus,
        comments=comments,
        measurements=measurements,
        sync=SyncAggregator(menus, comments, measurements),
        exporter=WorkoutExporter(menus, comments),
    )


def get_services(request: Request) -> Services:
    return request.app.state.services
