# gh_label_state/core/store.py

from pathlib import Path
import importlib.resources
import json

from loguru import logger
from github import Auth, Github
from omegaconf import DictConfig, OmegaConf

from .codec import extract_state
from .exceptions import ConfigurationError
from .operations import dispatch
from .request import check_arguments, parse_operation, parse_repository
from .types import Operation, OperationContext, OperationResult
from ..handlers.labels import LabelService


DEFAULT_CONFIG_PATH = Path.home() / ".config" / "gh-label-state" / "config.yml"


def load_config(config_path: Path | None = None) -> DictConfig:
    """Load a config file, falling back to the packaged default"""
    config_path = config_path or DEFAULT_CONFIG_PATH
    if not config_path.exists():
        # If default config doesn't exist, but we have a packaged default, use that
        if config_path == DEFAULT_CONFIG_PATH:
            with importlib.resources.files('gh_label_state').joinpath('default_config.yml').open('rb') as f:
                return OmegaConf.load(f)
        raise FileNotFoundError(f"Config file not found: {config_path}")
    return OmegaConf.load(config_path)


class LabelStateStore:
    """Interface for storing key/value state in the labels of an issue or PR"""

    def __init__(self, token: str, repo: str, config_path: Path | None = None):
        """Initialize the store with GitHub credentials and optional config"""
        self.owner, self.repo_name = parse_repository(repo)
        self.config = load_config(config_path)

        # The client page size and the usage check's short-page test must agree
        self.page_size = OmegaConf.select(self.config, "store.page_size", default=100)
        self.gh = Github(auth=Auth.Token(token), per_page=self.page_size)
        self.repo = self.gh.get_repo(repo)
        self.labels = LabelService(self.repo)

        logger.info(f"Initialized label state store for repository: {repo}")

    def context(
        self,
        issue_number: int,
        prefix: str | None = None,
        separator: str | None = None,
        delete_unused_labels: bool | None = None,
    ) -> OperationContext:
        """Build the operation context, letting explicit arguments override config"""
        state_config = self.config.get("state", {})
        if prefix is None:
            prefix = state_config.get("prefix", "")
        if separator is None:
            separator = state_config.get("separator", "::")
        if delete_unused_labels is None:
            delete_unused_labels = bool(state_config.get("delete_unused_labels", False))

        if not separator:
            raise ConfigurationError("Separator must be a non-empty string")

        return OperationContext(
            service=self.labels,
            owner=self.owner,
            repo=self.repo_name,
            issue_number=issue_number,
            prefix=prefix or "",
            separator=separator,
            delete_unused_labels=delete_unused_labels,
            page_size=self.page_size,
        )

    def execute(
        self,
        operation: Operation | str,
        issue_number: int,
        key: str | None = None,
        value: str | None = None,
        **overrides,
    ) -> OperationResult:
        """Read the issue's labels once and run an operation against them

        Failures reading or replacing the labels become a failed result
        carrying the error message; cleanup failures are only logged.
        """
        if not isinstance(operation, Operation):
            operation = parse_operation(operation)
        check_arguments(operation, key, value)
        context = self.context(issue_number, **overrides)

        logger.info(f"Performing operation: {operation.value}")
        logger.info(f"Issue number: {issue_number}")
        logger.info(f"Repository: {context.repository}")
        logger.info(f"Prefix: {context.prefix}, Separator: {context.separator}")

        try:
            current_labels = self.labels.list_labels(issue_number)
            current_state = extract_state(current_labels, context.prefix, context.separator)
            logger.info(f"Current state: {json.dumps(current_state)}")

            return dispatch(operation, context, key, value, current_labels)
        except Exception as e:
            logger.error(f"Operation {operation.value} failed on #{issue_number}: {e}")
            return OperationResult.failure(str(e))

    def get(self, issue_number: int, key: str, **overrides) -> OperationResult:
        """Get a single state value"""
        return self.execute(Operation.GET, issue_number, key=key, **overrides)

    def get_all(self, issue_number: int, **overrides) -> OperationResult:
        """Get all state values"""
        return self.execute(Operation.GET_ALL, issue_number, **overrides)

    def set(self, issue_number: int, key: str, value: str, **overrides) -> OperationResult:
        """Create or update a state value"""
        return self.execute(Operation.SET, issue_number, key=key, value=value, **overrides)

    def remove(self, issue_number: int, key: str, **overrides) -> OperationResult:
        """Remove a state key"""
        return self.execute(Operation.REMOVE, issue_number, key=key, **overrides)
