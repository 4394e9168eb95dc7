# gh_label_state/handlers/labels.py

from loguru import logger
from github import Repository

from ..core.types import Label


class LabelService:
    """Handles GitHub label operations for a single repository

    Every call goes straight to the API; nothing is retried or cached.
    """

    def __init__(self, repo: Repository.Repository):
        self.repo = repo

    def list_labels(self, issue_number: int) -> list[Label]:
        """List the labels currently attached to an issue or pull request"""
        issue = self.repo.get_issue(issue_number)
        return [Label.from_github(label) for label in issue.get_labels()]

    def replace_labels(self, issue_number: int, names: list[str]) -> list[Label]:
        """Replace the full label list of an issue or pull request"""
        logger.debug(f"Setting labels on #{issue_number}: {names}")
        issue = self.repo.get_issue(issue_number)
        issue.set_labels(*names)
        return [Label(name=name) for name in names]

    def delete_label(self, name: str) -> None:
        """Delete a label from the repository label catalog"""
        self.repo.get_label(name).delete()

    def list_issues_with_label(self, name: str, page: int, per_page: int) -> list:
        """Fetch one page (1-based) of issues and pull requests carrying a label

        PyGithub sizes pages from the client-wide per_page setting, so
        per_page is not sent with the request. It must equal the per_page the
        Github client was built with, or a short page no longer marks the end.
        LabelStateStore builds both from the same store.page_size value.
        """
        issues = self.repo.get_issues(labels=[name], state="all")
        results = issues.get_page(page - 1)
        logger.debug(f"Page {page} of issues labelled '{name}': {len(results)} result(s) (per_page={per_page})")
        return results
