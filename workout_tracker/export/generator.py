# -*- coding: utf-8 -*-
"""CSV export — flattens a user's menus and comments into one spreadsheet.

Row families share one header:

    type,user,date,menu,exercise,bodyPart,setNum,kg,reps,repRange,author,comment

``RECORD`` rows (one per performed set) come first, then ``COMMENT`` rows.
Sets where neither kg nor reps is a non-zero number are planned but not yet
done, and are left out.
"""

from __future__ import annotations

import csv
import io
import math
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Iterator, List, Optional

from ..comments.storage import CommentLog, split_session_key
from ..menus.storage import MenuManager
from ..store import normalize_user

HEADER = [
    "type",
    "user",
    "date",
    "menu",
    "exercise",
    "bodyPart",
    "setNum",
    "kg",
    "reps",
    "repRange",
    "author",
    "comment",
]

# Excel needs the BOM to detect UTF-8.
BOM = "\ufeff"

_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(value: Any) -> float:
    """Lenient float parse: leading numeric prefix, anything else is 0."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _NUMBER_PREFIX.match(str(value))
        if not match:
            return 0.0
        number = float(match.group(1))
    if math.isnan(number):
        return 0.0
    return number


def _cell(value: Any) -> str:
    if value is None or value is False or value == "":
        return ""
    if isinstance(value, float):
        if value == 0:
            return ""
        return str(int(value)) if value.is_integer() else str(value)
    if isinstance(value, int) and value == 0:
        return ""
    return str(value)


def export_filename(user: str, when: Optional[datetime] = None) -> str:
    when = when or datetime.now(timezone.utc)
    return f"workout_{normalize_user(user)}_{when.date().isoformat()}.csv"


def iter_record_rows(user: str, menus: Dict[str, Any]) -> Iterator[List[str]]:
    for menu_name, exercises in menus.items():
        for ex in exercises or []:
            records = ex.get("records") or []
            for rec in records:
                for set_num, s in enumerate(rec.get("sets") or [], start=1):
                    kg = s.get("kg")
                    reps = s.get("reps")
                    if not parse_number(kg) and not parse_number(reps):
                        continue
                    yield [
                        "RECORD",
                        user,
                        _cell(rec.get("date")),
                        _cell(menu_name),
                        _cell(ex.get("name")),
                        _cell(ex.get("body")),
                        str(set_num),
                        _cell(kg),
                        _cell(reps),
                        _cell(ex.get("repRange")),
                        "",
                        "",
                    ]


def iter_comment_rows(user: str, comments: Dict[str, Any]) -> Iterator[List[str]]:
    for key, thread in comments.items():
        date, menu_name = split_session_key(key)
        for c in thread or []:
            yield [
                "COMMENT",
                user,
                date,
                menu_name,
                "",
                "",
                "",
                "",
                "",
                "",
                _cell(c.get("author")),
                _cell(c.get("text")),
            ]


def render_csv(rows: Iterable[List[str]]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(HEADER)
    writer.writerows(rows)
    return BOM + buf.getvalue()


@dataclass
class CsvExport:
    filename: str
    content: str

    @property
    def data(self) -> bytes:
        return self.content.encode("utf-8")


class WorkoutExporter:
    def __init__(self, menus: MenuManager, comments: CommentLog) -> None:
        self.menus = menus
        self.comments = comments

    def export(self, user: str, *, now: Optional[datetime] = None) -> CsvExport:
        upper = normalize_user(user)
        menus = self.menus.get_menus(upper)
        if not isinstance(menus, dict):
            menus = {}
        comments = self.comments.get_comments(upper)
        rows: List[List[str]] = list(iter_record_rows(upper, menus))
        rows.extend(iter_comment_rows(upper, comments))
        return CsvExport(filename=export_filename(upper, now), content=render_csv(rows))
