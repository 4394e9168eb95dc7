# gh_label_state/cli/action.py
"""GitHub Action entrypoint: inputs from INPUT_* variables, outputs to GITHUB_OUTPUT."""

import os
import uuid
from pathlib import Path

from loguru import logger

from ..core.exceptions import ValidationError
from ..core.request import load_event, resolve_issue_number, validate_request
from ..core.store import LabelStateStore
from ..core.types import OperationResult
from .log import configure_logging, escape_workflow_data

TRUE_VALUES = ("true", "True", "TRUE")
FALSE_VALUES = ("false", "False", "FALSE")


def get_input(name: str, required: bool = False) -> str | None:
    """Read an action input; None when the variable is not set at all"""
    raw = os.environ.get(f"INPUT_{name.replace(' ', '_').upper()}")
    if raw is None:
        if required:
            raise ValidationError(f"Input required and not supplied: {name}")
        return None

    value = raw.strip()
    if required and not value:
        raise ValidationError(f"Input required and not supplied: {name}")
    return value


def get_boolean_input(name: str) -> bool | None:
    """Read a YAML 1.2 core-schema boolean input"""
    value = get_input(name)
    if value is None or value == "":
        return None
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValidationError(
        f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}\n"
        "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
    )


def set_output(name: str, value: str) -> None:
    """Write an output for later workflow steps"""
    output_file = os.environ.get("GITHUB_OUTPUT")
    if not output_file:
        print(f"{name}={value}")
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    with Path(output_file).open("a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")


def set_failed(message: str) -> None:
    """Report a failed run"""
    print(f"::error::{escape_workflow_data(message)}")
    set_output("success", "false")


def write_outputs(result: OperationResult) -> None:
    for name, value in result.to_outputs().items():
        set_output(name, value)


def run(config: str | None = None) -> None:
    """Run one state operation as configured by the action inputs"""
    config_path = Path(config) if config else None

    try:
        operation = get_input("operation", required=True)
        issue_number = resolve_issue_number(get_input("issue-number"), load_event())
        token = get_input("github-token")
        separator = get_input("separator") or None
        repository = get_input("repository") or os.environ.get("GITHUB_REPOSITORY", "")
        prefix = get_input("prefix")
        key = get_input("key")
        value = get_input("value")
        delete_unused_labels = get_boolean_input("delete-unused-labels")

        op, owner, repo = validate_request(operation, key, value, repository, token)

        store = LabelStateStore(token=token, repo=f"{owner}/{repo}", config_path=config_path)
        configure_logging(store.config)

        result = store.execute(
            op,
            issue_number,
            key=key,
            value=value,
            prefix=prefix,
            separator=separator,
            delete_unused_labels=delete_unused_labels,
        )
    except Exception as e:
        logger.debug(f"Action failed: {e!r}")
        set_failed(str(e))
        raise SystemExit(1)

    if result.reason is not None:
        set_failed(result.reason)
        raise SystemExit(1)

    write_outputs(result)
