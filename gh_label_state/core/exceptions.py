# gh_label_state/core/exceptions.py

class LabelStateError(Exception):
    """Base exception for label state errors"""
    pass

class ValidationError(LabelStateError):
    """Raised when a request is rejected before any API call is made"""
    pass

class ConfigurationError(LabelStateError):
    """Raised when there's an error in the store configuration"""
    pass

class ResolutionError(LabelStateError):
    """Raised when the issue or pull request to operate on cannot be determined"""
    pass

class IssueNotResolved(ResolutionError):
    """Raised when no issue number is given and none is available from the event"""

    def __init__(self, message=None):
        msg = message or (
            "No issue or PR number provided as input and none available from GitHub context. "
            "Either provide issue-number as input or run on issue/pull_request events."
        )
        super().__init__(msg)

class InvalidIssueNumber(ResolutionError):
    """Raised when the supplied issue number is not numeric"""

    def __init__(self, raw_value, message=None):
        self.raw_value = raw_value
        msg = message or "Invalid issue number provided in input"
        super().__init__(msg)
