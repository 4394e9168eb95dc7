# gh_label_state/__main__.py

import fire
from pathlib import Path
from loguru import logger

from .cli import commands
from .cli.action import run as run_action
from .core.store import DEFAULT_CONFIG_PATH
from .core.version import __version__


class CLI:
    """Issue/PR label state CLI"""

    def __init__(self):
        """Initialize CLI with default config path"""
        self.default_config_path = DEFAULT_CONFIG_PATH

    def init(
        self,
        config: str | None = None
    ) -> None:
        """Initialize a new configuration file"""
        config_path = Path(config) if config else self.default_config_path
        commands.ensure_config_exists(config_path)
        logger.info(f"Configuration initialized at {config_path}")

    def get(
        self,
        issue: int,
        key: str,
        output: str | None = None,
        token: str | None = None,
        repo: str | None = None,
        config: str | None = None,
        prefix: str | None = None,
        separator: str | None = None,
    ) -> None:
        """Get a single state value

        Args:
            issue: Issue or pull request number
            key: State key
            output: Path to write output (optional)
            token: GitHub token (optional)
            repo: GitHub repository (optional)
            config: Path to config file (optional)
            prefix: Label prefix, overrides config (optional)
            separator: Label separator, overrides config (optional)
        """
        return commands.get(issue, key, output, token, repo, config, prefix, separator)

    def get_all(
        self,
        issue: int,
        output: str | None = None,
        token: str | None = None,
        repo: str | None = None,
        config: str | None = None,
        prefix: str | None = None,
        separator: str | None = None,
    ) -> None:
        """Get all state values as a JSON object"""
        return commands.get_all(issue, output, token, repo, config, prefix, separator)

    def set(
        self,
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
        """Create or update a state value

        Args:
            issue: Issue or pull request number
            key: State key
            value: State value
            token: GitHub token (optional)
            repo: GitHub repository (optional)
            config: Path to config file (optional)
            prefix: Label prefix, overrides config (optional)
            separator: Label separator, overrides config (optional)
            delete_unused_labels: Delete the replaced label if no other issue uses it
        """
        return commands.set_value(
            issue, key, value, token, repo, config, prefix, separator, delete_unused_labels
        )

    def remove(
        self,
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
        return commands.remove(
            issue, key, token, repo, config, prefix, separator, delete_unused_labels
        )

    def run(self, config: str | None = None) -> None:
        """Run as a GitHub Action, reading INPUT_* variables"""
        return run_action(config)

    def version(self) -> str:
        """Print the installed version"""
        return __version__


def main():
    fire.Fire(CLI)

if __name__ == "__main__":
    main()
