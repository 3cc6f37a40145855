"""Derived planning figures computed from already-fetched lists.

Everything here is pure: no I/O and no persistence. Records are the dicts
returned by the storage layer, so dates may arrive as ``date`` objects or as
ISO ``YYYY-MM-DD`` strings.
"""
from datetime import date
import math
from typing import Any

from dateutil.relativedelta import relativedelta

PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}


def as_date(value: date | str | None) -> date | None:
    """Coerce an ISO date string (or date) to ``date``; ``None`` stays ``None``."""
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


def days_remaining(wedding_date: date | str | None, today: date | None = None) -> int:
    """Days until the wedding, floored at 0.

    Returns 0 both when no date is set and when it has already passed.
    """
    target = as_date(wedding_date)
    if target is None:
        return 0
    if today is None:
        today = date.today()
    return max(0, (target - today).days)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def percent_complete(completed: int, total: int) -> int:
    """Whole-number percentage, 0 for an empty total."""
    if total == 0:
        return 0
    return _round_half_up(100 * completed / total)


def task_progress(tasks: list[dict[str, Any]]) -> dict[str, int]:
    total = len(tasks)
    completed = sum(1 for task in tasks if task.get("completed"))
    return {
        "total": total,
        "completed": completed,
        "remaining": total - completed,
        "percent_complete": percent_complete(completed, total),
    }


def rsvp_summary(guests: list[dict[str, Any]]) -> dict[str, int]:
    """Counts per RSVP status; a guest has responded once confirmed or declined."""
    confirmed = sum(1 for guest in guests if guest.get("rsvp_status") == "confirmed")
    declined = sum(1 for guest in guests if guest.get("rsvp_status") == "declined")
    pending = len(guests) - confirmed - declined
    return {
        "total": len(guests),
        "confirmed": confirmed,
        "declined": declined,
        "pending": pending,
        "plus_ones": sum(1 for guest in guests if guest.get("plus_one")),
        "percent_responded": percent_complete(confirmed + declined, len(guests)),
    }


def budget_summary(categories: list[dict[str, Any]]) -> dict[str, float | int]:
    """Totals across categories. ``remaining`` goes negative when over budget."""
    total_estimated = sum(category.get("estimated_cost") or 0 for category in categories)
    total_actual = sum(category.get("actual_cost") or 0 for category in categories)
    percent_spent = _round_half_up(100 * total_actual / total_estimated) if total_estimated > 0 else 0
    return {
        "total_estimated": total_estimated,
        "total_actual": total_actual,
        "remaining": total_estimated - total_actual,
        "percent_spent": percent_spent,
    }


def upcoming_tasks(tasks: list[dict[str, Any]], limit: int = 5) -> list[dict[str, Any]]:
    """Incomplete tasks by due date, undated ones last."""
    pending = [task for task in tasks if not task.get("completed")]
    pending.sort(key=lambda task: (as_date(task.get("due_date")) is None, as_date(task.get("due_date")) or date.max))
    return pending[:limit]


def priority_tasks(tasks: list[dict[str, Any]], limit: int = 3) -> list[dict[str, Any]]:
    """Incomplete tasks, high priority first."""
    pending = [task for task in tasks if not task.get("completed")]
    pending.sort(key=lambda task: PRIORITY_ORDER.get(task.get("priority"), 1))
    return pending[:limit]


def months_before(wedding_date: date | str | None, other_date: date | str) -> int:
    """Whole months from ``other_date`` until the wedding (0 once past)."""
    target = as_date(wedding_date)
    other = as_date(other_date)
    if target is None or other is None or other >= target:
        return 0
    delta = relativedelta(target, other)
    return delta.years * 12 + delta.months


def timeframe_label(months: int | None) -> str:
    if not months:
        return "Wedding month"
    if months == 1:
        return "1 month before"
    return f"{months} months before"


def resolve_event_date(event: dict[str, Any], wedding_date: date | str | None) -> date | None:
    """Calendar date of a timeline event, placing ``months_before`` relative to the wedding."""
    explicit = as_date(event.get("date"))
    if explicit is not None:
        return explicit
    target = as_date(wedding_date)
    if target is not None and event.get("months_before") is not None:
        return target - relativedelta(months=event["months_before"])
    return None


def build_timeline(
    tasks: list[dict[str, Any]],
    events: list[dict[str, Any]],
    wedding_date: date | str | None,
) -> list[dict[str, Any]]:
    """Merge dated tasks and timeline events into one chronological list.

    Entries whose date cannot be resolved (no date, or ``months_before``
    without a wedding date) are kept at the end, largest ``months_before``
    first, because they cannot be placed on a calendar axis.
    """
    entries = []
    for task in tasks:
        due = as_date(task.get("due_date"))
        if due is None:
            continue
        entries.append({
            "source": "task",
            "id": task["id"],
            "title": task["title"],
            "description": task.get("description"),
            "date": due,
            "months_before": months_before(wedding_date, due) if wedding_date else None,
            "completed": bool(task.get("completed")),
        })

    for event in events:
        resolved = resolve_event_date(event, wedding_date)
        offset = event.get("months_before")
        if offset is None and resolved is not None and wedding_date:
            offset = months_before(wedding_date, resolved)
        entries.append({
            "source": "event",
            "id": event["id"],
            "title": event["title"],
            "description": event.get("description"),
            "date": resolved,
            "months_before": offset,
            "completed": bool(event.get("completed")),
        })

    for entry in entries:
        entry["timeframe"] = timeframe_label(entry["months_before"]) if entry["months_before"] is not None else None

    dated = sorted((e for e in entries if e["date"] is not None), key=lambda e: (e["date"], e["source"], e["id"]))
    undated = sorted(
        (e for e in entries if e["date"] is None),
        key=lambda e: (-(e["months_before"] or 0), e["id"]),
    )
    return dated + undated
