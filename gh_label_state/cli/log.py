# gh_label_state/cli/log.py

import os
import sys

from loguru import logger
from omegaconf import DictConfig, OmegaConf

DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"

# loguru level -> GitHub workflow command
WORKFLOW_COMMANDS = {
    "WARNING": "warning",
    "ERROR": "error",
    "CRITICAL": "error",
}


def running_in_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS") == "true"


def escape_workflow_data(text: str) -> str:
    """Escape a message for use in a workflow command"""
    return text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def workflow_command_sink(message) -> None:
    """Echo warnings and errors as ::warning:: / ::error:: annotations"""
    record = message.record
    command = WORKFLOW_COMMANDS.get(record["level"].name)
    if command:
        sys.stdout.write(f"::{command}::{escape_workflow_data(record['message'])}\n")
        sys.stdout.flush()


def configure_logging(config: DictConfig | None = None, actions: bool | None = None) -> None:
    """Set up loguru sinks from the log section of the config"""
    level = "INFO"
    fmt = DEFAULT_FORMAT
    if config is not None:
        level = OmegaConf.select(config, "log.level", default=level)
        fmt = OmegaConf.select(config, "log.format", default=fmt)

    logger.remove()
    logger.add(sys.stderr, level=level, format=fmt)

    if actions is None:
        actions = running_in_actions()
    if actions:
        logger.add(workflow_command_sink, level="WARNING", format="{message}")
