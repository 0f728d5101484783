# -*- coding: utf-8 -*-
"""Sync snapshot for polling clients.

There is no push channel: clients call ``GET /api/sync/{user}`` on an interval
and replace their local state with the response.
"""
