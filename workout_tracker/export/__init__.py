# -*- coding: utf-8 -*-
"""
CSV export of workout records and comments
"""

from .generator import CsvExport, WorkoutExporter

__all__ = [
    'CsvExport',
    'WorkoutExporter',
]
