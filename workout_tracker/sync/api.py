# -*- coding: utf-8 -*-
"""Sync snapshot — API endpoint polled by trainer and trainee clients."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..deps import Services, get_services

router = APIRouter(prefix="/api/sync", tags=["Sync"])


@router.get("/{user}", summary="Menus, comments and measurements with server time")
def sync_snapshot(user: str, services: Services = Depends(get_services)):
    return services.sync.sync(user)
