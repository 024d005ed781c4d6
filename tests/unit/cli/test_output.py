"""Tests for CLI output helpers and exit codes."""

import json

import pytest

from stringy.cli.exit_codes import ExitCode
from stringy.cli.output import CLIResult, error_exit, success_output


class TestExitCode:
    def test_values(self) -> None:
        assert ExitCode.SUCCESS == 0
        assert ExitCode.HOST_ERROR == 1
        assert ExitCode.USAGE_ERROR == 2


class TestCLIResult:
    """Tests for CLIResult rendering."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("fòô", "fòô"),
            (True, "true"),
            (False, "false"),
            (None, "null"),
            (0, "0"),
            (["a", "b"], "a\nb"),
            ([], ""),
        ],
    )
    def test_to_text(self, value, expected) -> None:
        assert CLIResult(operation="op", result=value).to_text() == expected

    def test_to_json(self) -> None:
        """Non-ASCII text is kept as-is."""
        output = CLIResult(operation="reverse", result="ôòf").to_json()

        assert "ôòf" in output
        assert json.loads(output) == {"operation": "reverse", "result": "ôòf"}


class TestErrorExit:
    """Tests for error_exit()."""

    def test_text(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            error_exit("bad thing", ExitCode.USAGE_ERROR)

        assert exc_info.value.code == 2
        assert capsys.readouterr().err == "Error: bad thing\n"

    def test_json(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            error_exit("bad thing", ExitCode.HOST_ERROR, json_output=True)

        assert exc_info.value.code == 1
        data = json.loads(capsys.readouterr().err)
        assert data == {
            "status": "failed",
            "error": {"code": "HOST_ERROR", "message": "bad thing"},
        }

    def test_plain_int_code(self, capsys) -> None:
        """Codes outside ExitCode are reported as UNKNOWN_ERROR."""
        with pytest.raises(SystemExit) as exc_info:
            error_exit("odd", 7, json_output=True)

        assert exc_info.value.code == 7
        assert json.loads(capsys.readouterr().err)["error"]["code"] == "UNKNOWN_ERROR"


class TestSuccessOutput:
    def test_text(self, capsys) -> None:
        success_output(CLIResult(operation="lines", result=["a", "b"]))

        assert capsys.readouterr().out == "a\nb\n"

    def test_json(self, capsys) -> None:
        success_output(CLIResult(operation="length", result=3), json_output=True)

        assert json.loads(capsys.readouterr().out) == {"operation": "length", "result": 3}
