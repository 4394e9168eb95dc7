# gh_label_state/core/request.py

import json
import os
from pathlib import Path
from typing import Any

from loguru import logger

from .exceptions import InvalidIssueNumber, IssueNotResolved, ValidationError
from .types import Operation


def parse_operation(operation: str) -> Operation:
    """Map an operation name onto the Operation enum"""
    try:
        return Operation(operation)
    except ValueError:
        raise ValidationError(
            f"Invalid operation: {operation}. Must be: {', '.join(Operation.names())}"
        ) from None


def parse_repository(repository: str) -> tuple[str, str]:
    """Split an owner/repo string"""
    parts = (repository or "").split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ValidationError("Invalid repository format. Expected: owner/repo")
    return parts[0], parts[1]


def check_arguments(operation: Operation, key: str | None, value: str | None) -> None:
    """Ensure the key and value an operation needs are present"""
    if operation.requires_key and not key:
        raise ValidationError(f"Key is required for operation: {operation.value}")

    if operation.requires_value and not value:
        raise ValidationError(f"Value is required for operation: {operation.value}")


def validate_request(
    operation: str,
    key: str | None,
    value: str | None,
    repository: str,
    token: str | None
) -> tuple[Operation, str, str]:
    """
    Validate a request before any API call is made.

    Args:
        operation: Operation name (set, remove, get, get-all)
        key: State key, required for everything but get-all
        value: State value, required for set
        repository: Repository in owner/repo format
        token: GitHub token

    Returns:
        tuple: (operation, owner, repo)

    Raises:
        ValidationError: If any input is missing or malformed
    """
    owner, repo = parse_repository(repository)
    op = parse_operation(operation)
    check_arguments(op, key, value)

    if not token:
        raise ValidationError("GitHub token is required")

    return op, owner, repo


def load_event(event_path: str | None = None) -> dict[str, Any]:
    """Load the triggering event payload, or an empty dict outside of Actions"""
    event_path = event_path or os.environ.get("GITHUB_EVENT_PATH")
    if not event_path:
        return {}

    path = Path(event_path)
    if not path.exists():
        logger.warning(f"GitHub event payload not found at {path}")
        return {}

    return json.loads(path.read_text())


def resolve_issue_number(issue_number: str | int | None, event: dict[str, Any] | None = None) -> int:
    """
    Determine the issue or pull request to operate on.

    An explicit issue number wins; otherwise the number is taken from the
    issue or pull_request in the event payload.

    Raises:
        InvalidIssueNumber: If the explicit input is not numeric
        IssueNotResolved: If no number is available at all
    """
    if issue_number not in (None, ""):
        try:
            return int(str(issue_number).strip())
        except ValueError:
            raise InvalidIssueNumber(issue_number) from None

    event = event or {}
    for source in ("issue", "pull_request"):
        number = (event.get(source) or {}).get("number")
        if number:
            return int(number)

    raise IssueNotResolved()
