from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def format_list_timestamp(value: datetime | str | None) -> str:
    if value is None:
        return "-"
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value)
        try:
            dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return text
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%SZ")


def follower_rows(data: dict[str, Any]) -> list[tuple[str, str, str]]:
    """Flatten a follows page into (id, name, followed_at) rows.

    Understands both the kraken (``follows``) and helix (``data``) shapes.
    """
    rows: list[tuple[str, str, str]] = []
    for item in data.get("follows") or []:
        if not isinstance(item, dict):
            continue
        user = item.get("user") if isinstance(item.get("user"), dict) else {}
        rows.append(
            (
                str(user.get("_id") or "-"),
                str(user.get("display_name") or user.get("name") or "-"),
                format_list_timestamp(item.get("created_at")),
            )
        )
    for item in data.get("data") or []:
        if not isinstance(item, dict):
            continue
        rows.append(
            (
                str(item.get("from_id") or "-"),
                str(item.get("from_name") or item.get("from_login") or "-"),
                format_list_timestamp(item.get("followed_at")),
            )
        )
    return rows


def follower_total(data: dict[str, Any]) -> int | None:
    total = data.get("_total", data.get("total"))
    if isinstance(total, int):
        return total
    return None


def next_cursor(data: dict[str, Any]) -> str | None:
    cursor = data.get("_cursor")
    if not cursor and isinstance(data.get("pagination"), dict):
        cursor = data["pagination"].get("cursor")
    return str(cursor) if cursor else None
