from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from flask import Flask, jsonify, request

from ..budget.model import Budget
from ..commands.attendance import AddAttendanceCommand, MarkAttendanceCommand, ShowAttendanceCommand
from ..commands.base import Command
from ..commands.entities import (
    AddEventCommand,
    AddPersonCommand,
    AddTaskCommand,
    BudgetCommand,
    ClearBudgetCommand,
    SetBudgetCommand,
)
from ..commands.history import RedoCommand, UndoCommand
from ..common.money import Money
from ..container import Container
from ..core.constants import MEMBER_DELIMITER
from ..core.exceptions import DomainError, ValidationError
from ..events.model import Event, EventId
from ..persons.model import Name, Person
from ..tasks.model import Task


def parse_member_names(raw: Any) -> list[Name]:
    """Accept a JSON list of names or one ``/``-separated string."""

    if isinstance(raw, str):
        parts = raw.split(MEMBER_DELIMITER)
    elif isinstance(raw, list):
        parts = raw
    else:
        raise ValidationError("members must be a list or a '/'-separated string")

    names: list[Name] = []
    for part in parts:
        trimmed = str(part or "").strip()
        if not trimmed:
            raise ValidationError("Member names must not be empty")
        names.append(Name(trimmed))
    if not names:
        raise ValidationError("At least one member is required")
    return names


def _parse_date(value: Any, field_name: str) -> date:
    try:
        return datetime.strptime(str(value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid date (YYYY-MM-DD)")


def _parse_deadline(value: Any) -> Optional[datetime]:
    v = str(value or "").strip()
    if not v:
        return None
    try:
        return datetime.fromisoformat(v)
    except ValueError:
        raise ValidationError("deadline is not a valid date-time (YYYY-MM-DDTHH:MM)")


def _names(names) -> list[str]:
    return [str(n) for n in names]


def register(app: Flask, container: Container) -> None:
    runner = container.runner

    def body() -> dict:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    def run(command: Command, *, status: int = 200, **extra):
        try:
            result = runner.run(command)
        except DomainError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        payload = {"success": True, "message": result.feedback}
        payload.update({k: fn(result.data) for k, fn in extra.items()})
        return jsonify(payload), status

    def build(factory):
        """Run ``factory`` to build a command; bad input becomes a 400."""

        try:
            return factory(), None
        except DomainError as e:
            return None, (jsonify({"success": False, "message": str(e)}), 400)

    @app.route("/api/persons", methods=["POST"], endpoint="add_person")
    def add_person():
        data = body()
        command, error = build(
            lambda: AddPersonCommand(
                Person(
                    Name(str(data.get("name") or "")),
                    phone=data.get("phone"),
                    email=data.get("email"),
                    tags=frozenset(data.get("tags") or ()),
                )
            )
        )
        return error or run(command, status=201)

    @app.route("/api/events", methods=["POST"], endpoint="add_event")
    def add_event():
        data = body()
        command, error = build(
            lambda: AddEventCommand(
                Event(
                    EventId(str(data.get("event_id") or "")),
                    str(data.get("description") or ""),
                    _parse_date(data.get("date"), "date"),
                    Money.parse(data.get("expense") or "0"),
                )
            )
        )
        return error or run(command, status=201)

    @app.route("/api/tasks", methods=["POST"], endpoint="add_task")
    def add_task():
        data = body()
        command, error = build(
            lambda: AddTaskCommand(Task(str(data.get("title") or ""), deadline=_parse_deadline(data.get("deadline"))))
        )
        return error or run(command, status=201)

    @app.route("/api/budget", methods=["GET"], endpoint="show_budget")
    def show_budget():
        return run(
            BudgetCommand(),
            spent=lambda s: str(s.spent),
            remaining=lambda s: str(s.remaining),
            overspent=lambda s: str(s.overspent),
        )

    @app.route("/api/budget", methods=["PUT"], endpoint="set_budget")
    def set_budget():
        data = body()
        command, error = build(
            lambda: SetBudgetCommand(
                Budget(
                    Money.parse(data.get("amount") or "0"),
                    _parse_date(data.get("start_date"), "start_date"),
                    _parse_date(data.get("end_date"), "end_date"),
                )
            )
        )
        return error or run(command)

    @app.route("/api/budget", methods=["DELETE"], endpoint="clear_budget")
    def clear_budget():
        return run(ClearBudgetCommand())

    @app.route("/api/events/<event_id>/attendance", methods=["POST"], endpoint="add_attendance")
    def add_attendance(event_id: str):
        data = body()
        command, error = build(lambda: AddAttendanceCommand(EventId(event_id), parse_member_names(data.get("members"))))
        return error or run(
            command,
            added=lambda r: _names(r.added_members),
            duplicates=lambda r: _names(r.duplicate_members),
        )

    @app.route("/api/events/<event_id>/attendance/mark", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance(event_id: str):
        data = body()
        command, error = build(lambda: MarkAttendanceCommand(EventId(event_id), parse_member_names(data.get("members"))))
        return error or run(
            command,
            newly_marked=lambda r: _names(r.newly_marked_members),
            already_marked=lambda r: _names(r.already_marked_members),
        )

    @app.route("/api/events/<event_id>/attendance", methods=["GET"], endpoint="show_attendance")
    def show_attendance(event_id: str):
        command, error = build(lambda: ShowAttendanceCommand(EventId(event_id)))
        return error or run(
            command,
            attended=lambda s: _names(s.attended),
            absent=lambda s: _names(s.absent),
        )

    @app.route("/api/undo", methods=["POST"], endpoint="undo")
    def undo():
        return run(UndoCommand())

    @app.route("/api/redo", methods=["POST"], endpoint="redo")
    def redo():
        return run(RedoCommand())
