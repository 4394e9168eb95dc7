# tests/unit/fixtures/test_data.py
"""Standard test data for gh-label-state unit tests."""

# Labels on the issue under test, in API order
SAMPLE_LABELS = [
    {"name": "bug", "color": "f29513", "description": "Something isn't working"},
    {"name": "state::step::1", "color": "a2eeef", "description": "State label"},
    {"name": "state::status::pending", "color": "fbca04", "description": "State label"},
    {"name": "enhancement", "color": "0e8a16", "description": "New feature or request"},
]

SAMPLE_LABEL_NAMES = [label["name"] for label in SAMPLE_LABELS]

SAMPLE_STATE = {"step": "1", "status": "pending"}

SAMPLE_CONFIGS = {
    "minimal": {
        "state": {
            "prefix": "state",
            "separator": "::"
        }
    },
    "full": {
        "state": {
            "prefix": "state",
            "separator": "::",
            "delete_unused_labels": False
        },
        "store": {
            "page_size": 100
        },
        "log": {
            "level": "INFO",
            "format": "{time} | {level} | {message}"
        }
    }
}
