from __future__ import annotations

from typing import Iterable

from ..attendance.model import AddAttendanceResult, AttendanceSummary, MarkAttendanceResult
from ..budget.model import BudgetSummary
from ..core.constants import LABEL_NONE, MESSAGE_MEMBER_ALREADY_ADDED, NAME_SEPARATOR
from ..persons.model import Name


def format_names(names: Iterable[Name]) -> str:
    text = NAME_SEPARATOR.join(str(n) for n in names)
    return text or LABEL_NONE


def format_add_attendance(result: AddAttendanceResult) -> str:
    message = f"Attendance list for {result.event.description} updated.\nAdded: {format_names(result.added_members)}"
    if result.duplicate_members:
        message += "\n" + MESSAGE_MEMBER_ALREADY_ADDED.format(names=format_names(result.duplicate_members))
    return message


def format_mark_attendance(result: MarkAttendanceResult) -> str:
    return (
        f"Attendance for {result.event.description} marked.\n"
        f"Newly marked: {format_names(result.newly_marked_members)}\n"
        f"Already marked: {format_names(result.already_marked_members)}"
    )


def format_attendance_summary(summary: AttendanceSummary) -> str:
    return (
        f"Attendance summary for {summary.event.description}:\n"
        f"Attended ({summary.attended_count}): {format_names(summary.attended)}\n"
        f"Absent ({summary.absent_count}): {format_names(summary.absent)}"
    )


def format_budget_summary(summary: BudgetSummary) -> str:
    budget = summary.budget
    lines = [
        f"Budget {budget.amount} for {budget.start_date:%Y-%m-%d} to {budget.end_date:%Y-%m-%d}",
        f"Spent: {summary.spent} across {summary.event_count} event(s)",
        f"Remaining: {summary.remaining}",
    ]
    if summary.is_over_budget:
        lines.append(f"Over budget by: {summary.overspent}")
    return "\n".join(lines)
