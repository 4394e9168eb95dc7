# gh_label_state/core/usage.py

from loguru import logger

from .types import OperationContext

PAGE_SIZE = 100


def is_used_elsewhere(context: OperationContext, label_name: str) -> bool:
    """
    Check whether any issue or PR other than the current one carries a label.

    Pages through the issues the API returns for the label and stops at the
    first one that is not the current issue. Any failure while paging is
    treated as "in use", so a label is never deleted on incomplete information.

    Args:
        context: Operation context identifying the current issue
        label_name: Name of the label to check

    Returns:
        bool: True if the label is (or may be) used elsewhere
    """
    per_page = context.page_size or PAGE_SIZE
    page = 1

    try:
        while True:
            issues = context.service.list_issues_with_label(label_name, page, per_page)

            others = [issue for issue in issues if issue.number != context.issue_number]
            if others:
                logger.debug(f"Label '{label_name}' is still used by #{others[0].number}")
                return True

            if len(issues) < per_page:
                return False

            page += 1
    except Exception as e:
        logger.warning(f"Failed to check if label '{label_name}' is used by other issues: {e}")
        return True
