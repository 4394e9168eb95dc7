# gh_label_state/cli/commands.py

import os
import json
from pathlib import Path
import shutil
import importlib.resources
from loguru import logger

from ..core.store import LabelStateStore
from ..core.types import OperationResult


def ensure_config_exists(config_path: Path) -> None:
    """Create default config file if it doesn't exist"""
    if not config_path.exists():
        logger.info(f"Creating default configuration at {config_path}")
        config_path.parent.mkdir(parents=True, exist_ok=True)

        # Copy default config from package
        with importlib.resources.files('gh_label_state').joinpath('default_config.yml').open('rb') as src:
            with open(config_path, 'wb') as dst:
                shutil.copyfileobj(src, dst)

        logger.info("Default configuration created. You can modify it at any time.")


def get_store(token: str | None = None, repo: str | None = None, config: str | None = None) -> LabelStateStore:
    """Helper to create LabelStateStore instance with CLI parameters"""
    token = token or os.environ["GITHUB_TOKEN"]
    repo = repo or os.environ["GITHUB_REPOSITORY"]
    config_path = Path(config) if config else None

    if config_path:
        ensure_config_exists(config_path)

    return LabelStateStore(token=token, repo=repo, config_path=config_path)


def _state_overrides(prefix: str | None, separator: str | None, delete_unused_labels: bool | None) -> dict:
    # Only pass what was given so the config fills in the rest
    overrides = {}
    if prefix is not None:
        overrides["prefix"] = str(prefix)
    if separator is not None:
        overrides["separator"] = str(separator)
    if delete_unused_labels is not None:
        overrides["delete_unused_labels"] = bool(delete_unused_labels)
    return overrides


def _emit(result: OperationResult, output: str | None = None) -> None:
    """Print or write the result, exiting non-zero when the operation errored"""
    if result.reason is not None:
        logger.error(f"Operation failed: {result.reason}")
        raise SystemExit(1)

    rendered = json.dumps(result.to_dict(), indent=2)
    if output:
        Path(output).write_text(rendered)
        logger.info(f"Result written to {output}")
    else:
        print(rendered)


def get(
    issue: int,
    key: str,
    output: str | None = None,
    token: str | None = None,
    repo: str | None = None,
    config: str | None = None,
    prefix: str | None = None,
    separator: str | None = None,
) -> None:
    """Get a single state value"""
    try:
        store = get_store(token, repo, config)
        result = store.get(int(issue), str(key), **_state_overrides(prefix, separator, None))
    except Exception:
        logger.exception("Failed to get state value")
        raise SystemExit(1)

    _emit(result, output)


def get_all(
    issue: int,
    output: str | None = None,
    token: str | None = None,
    repo: str | None = None,
    config: str | None = None,
    prefix: str | None = None,
    separator: str | None = None,
) -> None:
    """Get all state values"""
    try:
        store = get_store(token, repo, config)
        result = store.get_all(int(issue), **_state_overrides(prefix, separator, None))
    except Exception:
        logger.exception("Failed to get state")
        raise SystemExit(1)

    _emit(result, output)


def set_value(
    issue: int,
    key: str,
    value: str,
    token: str | None = None,
    repo: str | None = None,
    config: str | None = None,
    prefix: str | None = None,
    separator: str | None = None,
    delete_unused_labels: bool | None = None,
) -> None:
    """Create or update a state value"""
    try:
        store = get_store(token, repo, config)
        result = store.set(
            int(issue), str(key), str(value),
            **_state_overrides(prefix, separator, delete_unused_labels)
        )
    except Exception:
        logger.exception("Failed to set state value")
        raise SystemExit(1)

    _emit(result)


def remove(
    issue: int,
    key: str,
    token: str | None = None,
    repo: str | None = None,
    config: str | None = None,
    prefix: str | None = None,
    separator: str | None = None,
    delete_unused_labels: bool | None = None,
) -> None:
    """Remove a state key"""
    try:
        store = get_store(token, repo, config)
        result = store.remove(
            int(issue), str(key),
            **_state_overrides(prefix, separator, delete_unused_labels)
        )
    except Exception:
        logger.exception("Failed to remove state key")
        raise SystemExit(1)

    _emit(result)
