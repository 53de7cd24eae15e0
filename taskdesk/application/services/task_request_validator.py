"""Validates create-task input before any data store access.

Checks run in a fixed order and the first failure is raised:
presence, task type, due_at format, due_at in the future.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from taskdesk.domain.enums import TaskType
from taskdesk.domain.exceptions import (
    InvalidDueDateException,
    InvalidTaskTypeException,
    MissingFieldsException,
    PastDueDateException,
)
from taskdesk.shared.utils.datetime import ensure_utc, isoformat_utc, parse_iso_datetime

REQUIRED_FIELDS = ("application_id", "task_type", "due_at")


@dataclass(frozen=True)
class ValidatedTaskRequest:
    """Create-task input that passed every check that does not need the data store."""

    application_id: str
    task_type: TaskType
    due_at: datetime


def _parse_due_at(due_at: str) -> datetime:
    try:
        return parse_iso_datetime(due_at)
    except (ValueError, OverflowError) as e:
        raise InvalidDueDateException(due_at) from e


def _storable(due_at: str, parsed: datetime) -> datetime:
    """UTC value at millisecond precision, as stored and echoed."""
    try:
        utc = ensure_utc(parsed)
    except OverflowError as e:
        # e.g. 9999-12-31T23:00:00-05:00 lies past datetime.max in UTC
        raise InvalidDueDateException(due_at) from e
    return utc.replace(microsecond=utc.microsecond // 1000 * 1000)


def validate_create_task_request(
    application_id: str | None,
    task_type: str | None,
    due_at: str | None,
    *,
    now: datetime,
) -> ValidatedTaskRequest:
    """Run the create-task validation pipeline.

    Args:
        application_id: Raw application id from the request.
        task_type: Raw task type from the request.
        due_at: Raw ISO-8601 due timestamp from the request.
        now: Server time read once for this request.

    Returns:
        ValidatedTaskRequest with the enum type and UTC due_at.

    Raises:
        MissingFieldsException: Any field absent or empty.
        InvalidTaskTypeException: task_type not in TaskType.
        InvalidDueDateException: due_at does not parse, or is future but out of
            the representable UTC range.
        PastDueDateException: due_at <= now.
    """
    values = {"application_id": application_id, "task_type": task_type, "due_at": due_at}
    missing = [name for name in REQUIRED_FIELDS if not values[name]]
    if missing:
        raise MissingFieldsException(list(REQUIRED_FIELDS), missing)

    try:
        validated_type = TaskType(task_type)
    except ValueError as e:
        raise InvalidTaskTypeException(task_type, TaskType.values()) from e

    parsed_due_at = _parse_due_at(due_at)
    # Full precision here; only the stored value is cut to milliseconds.
    reference = ensure_utc(now)
    if parsed_due_at <= reference:
        raise PastDueDateException(due_at, isoformat_utc(reference))

    return ValidatedTaskRequest(
        application_id=application_id,
        task_type=validated_type,
        due_at=_storable(due_at, parsed_due_at),
    )
