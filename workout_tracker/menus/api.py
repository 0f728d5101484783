# -*- coding: utf-8 -*-
"""Menus — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..deps import Services, get_services
from .models import MenuTabPatchRequest, MenusReplaceRequest, OkResponse

router = APIRouter(prefix="/api/menus", tags=["Menus"])


@router.get("/{user}", summary="Get a user's menus (null = never saved)")
def get_menus(user: str, services: Services = Depends(get_services)):
    return {"menus": services.menus.get_menus(user)}


@router.put("/{user}", response_model=OkResponse, summary="Replace all menus")
def replace_menus(user: str, request: MenusReplaceRequest, services: Services = Depends(get_services)):
    services.menus.replace_menus(user, request.to_document())
    return OkResponse()


@router.patch("/{user}/{tab}", response_model=OkResponse, summary="Save a single menu tab")
def patch_menu_tab(
    user: str,
    tab: str,
    request: MenuTabPatchRequest,
    services: Services = Depends(get_services),
):
    services.menus.patch_tab(user, tab, request.to_document())
    return OkResponse()
