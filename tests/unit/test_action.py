# tests/unit/test_action.py
"""GitHub Action entrypoint tests."""

import json
import pytest

from gh_label_state.cli.action import get_boolean_input, get_input, run, set_output
from gh_label_state.core.exceptions import ValidationError


def read_outputs(path) -> dict[str, str]:
    """Parse a GITHUB_OUTPUT file written with heredoc delimiters."""
    outputs = {}
    lines = path.read_text().splitlines()
    i = 0
    while i < len(lines):
        name, delimiter = lines[i].split("<<", 1)
        i += 1
        value_lines = []
        while lines[i] != delimiter:
            value_lines.append(lines[i])
            i += 1
        outputs[name] = "\n".join(value_lines)
        i += 1
    return outputs


class TestInputs:
    def test_get_input(self, clean_env):
        clean_env.setenv("INPUT_ISSUE-NUMBER", " 12 ")
        assert get_input("issue-number") == "12"

    def test_unset_input_is_none(self, clean_env):
        assert get_input("prefix") is None

    def test_required_input(self, clean_env):
        with pytest.raises(ValidationError, match="Input required and not supplied: operation"):
            get_input("operation", required=True)

    @pytest.mark.parametrize("raw,expected", [
        ("true", True), ("True", True), ("TRUE", True),
        ("false", False), ("False", False), ("FALSE", False),
        ("", None),
    ])
    def test_boolean_input(self, clean_env, raw, expected):
        clean_env.setenv("INPUT_DELETE-UNUSED-LABELS", raw)
        assert get_boolean_input("delete-unused-labels") is expected

    def test_invalid_boolean_input(self, clean_env):
        clean_env.setenv("INPUT_DELETE-UNUSED-LABELS", "yes")
        with pytest.raises(ValidationError):
            get_boolean_input("delete-unused-labels")


def test_set_output_without_file(clean_env, capsys):
    set_output("success", "true")
    assert capsys.readouterr().out == "success=true\n"


class TestRun:
    def test_get(self, action_env, github_mock):
        output = action_env(operation="get", key="step", issue_number="1")

        run()

        assert read_outputs(output) == {"success": "true", "value": "1"}

    def test_get_missing_key(self, action_env, github_mock):
        output = action_env(operation="get", key="nope", issue_number="1")

        run()

        assert read_outputs(output) == {"success": "false", "value": ""}

    def test_get_all(self, action_env, github_mock):
        output = action_env(operation="get-all", issue_number="1")

        run()

        outputs = read_outputs(output)
        assert outputs["success"] == "true"
        assert json.loads(outputs["state"]) == {"step": "1", "status": "pending"}

    def test_set(self, action_env, github_mock):
        _, _, mock_api = github_mock
        output = action_env(operation="set", key="step", value="2", issue_number="1")

        run()

        assert read_outputs(output) == {"success": "true"}
        assert mock_api.issue_labels[1][-1] == "state::step::2"

    def test_set_with_cleanup(self, action_env, github_mock):
        _, _, mock_api = github_mock
        action_env(operation="set", key="step", value="2", issue_number="1", delete_unused_labels="true")

        run()

        assert "state::step::1" not in mock_api.catalog

    def test_remove_missing_key(self, action_env, github_mock):
        output = action_env(operation="remove", key="nope", issue_number="1")

        run()

        assert read_outputs(output) == {"success": "false"}

    def test_issue_from_event(self, action_env, github_mock, tmp_path, clean_env):
        event = tmp_path / "event.json"
        event.write_text(json.dumps({"pull_request": {"number": 1}}))
        clean_env.setenv("GITHUB_EVENT_PATH", str(event))
        output = action_env(operation="get", key="status")

        run()

        assert read_outputs(output)["value"] == "pending"

    def test_custom_format(self, action_env, github_mock):
        _, _, mock_api = github_mock
        mock_api.add_issue(4, ["wf|phase|build"])
        output = action_env(operation="get", key="phase", issue_number="4", prefix="wf", separator="|")

        run()

        assert read_outputs(output)["value"] == "build"

    @pytest.mark.parametrize("inputs,message", [
        ({"operation": "bogus", "issue_number": "1"}, "Invalid operation: bogus"),
        ({"operation": "get", "issue_number": "1"}, "Key is required for operation: get"),
        ({"operation": "set", "key": "k", "issue_number": "1"}, "Value is required for operation: set"),
        ({"operation": "get", "key": "k", "issue_number": "1", "repository": "bad"}, "Invalid repository format"),
        ({"operation": "get", "key": "k", "issue_number": "abc"}, "Invalid issue number provided in input"),
        ({"operation": "get", "key": "k"}, "No issue or PR number provided"),
        ({"operation": "get", "key": "k", "issue_number": "1", "github_token": ""}, "GitHub token is required"),
    ])
    def test_invalid_inputs_fail(self, action_env, github_mock, capsys, inputs, message):
        _, mock_repo, _ = github_mock
        output = action_env(**inputs)

        with pytest.raises(SystemExit) as exc_info:
            run()

        assert exc_info.value.code == 1
        assert f"::error::{message}" in capsys.readouterr().out
        assert read_outputs(output) == {"success": "false"}
        mock_repo.get_issue.assert_not_called()

    def test_api_error_fails(self, action_env, github_mock, capsys):
        _, mock_repo, _ = github_mock
        mock_repo.get_issue.side_effect = RuntimeError("API Error")
        output = action_env(operation="get-all", issue_number="1")

        with pytest.raises(SystemExit):
            run()

        assert "::error::API Error" in capsys.readouterr().out
        assert read_outputs(output) == {"success": "false"}
