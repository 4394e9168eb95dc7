# tests/unit/fixtures/common.py
"""Common mock factories and utilities for gh-label-state unit tests."""

from unittest.mock import Mock

def create_github_label(
    name: str,
    color: str = "ededed",
    description: str | None = None,
    **kwargs
) -> Mock:
    """
    Create a mock GitHub label.

    Args:
        name: Label name
        color: Hex color without '#'
        description: Label description
        **kwargs: Additional attributes to set on the mock

    Returns:
        Mock label with GitHub-like structure
    """
    label = Mock()
    label.name = name
    label.color = color
    label.description = description
    label.delete = Mock()

    for key, value in kwargs.items():
        setattr(label, key, value)

    return label

def create_issue_ref(number: int) -> Mock:
    """Create a minimal mock issue as returned by a label search."""
    issue = Mock()
    issue.number = number
    return issue

def create_issue_refs(numbers) -> list[Mock]:
    return [create_issue_ref(number) for number in numbers]
