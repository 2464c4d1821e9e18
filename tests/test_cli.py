"""
CLI Tests
=========
Exit codes, stdout contents and color resolution for `lint-diff`.
Logging setup is patched out so the tests do not reconfigure the root logger.
"""
import io
import json
from unittest.mock import patch

import pytest

from lint_diff import cli


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def _eslint(messages, file_path="/repo/src/app.js"):
    return [{"filePath": file_path, "messages": messages}]


_UNUSED = {"line": 1, "column": 1, "severity": 2, "ruleId": "no-unused-vars", "message": "x is unused"}
_CONSOLE = {"line": 5, "column": 3, "severity": 1, "ruleId": "no-console", "message": "Unexpected console"}


@pytest.fixture(autouse=True)
def _quiet_cli():
    with patch("lint_diff.cli.setup_logging"), \
         patch("lint_diff.cli.config.COLOR_MODE", "never"):
        yield


# ===================================================================
# Exit codes and output
# ===================================================================
def test_no_new_findings_prints_nothing(tmp_path, capsys):
    before = _write(tmp_path / "a.json", _eslint([_UNUSED]))
    after = _write(tmp_path / "b.json", _eslint([_UNUSED]))

    assert cli.main([before, after]) == 0
    assert capsys.readouterr().out == ""


def test_new_findings_exit_one(tmp_path, capsys):
    before = _write(tmp_path / "a.json", _eslint([]))
    after = _write(tmp_path / "b.json", _eslint([_CONSOLE]))

    assert cli.main([before, after]) == 1
    out = capsys.readouterr().out
    assert out.startswith("/repo/src/app.js\n")
    assert "NEW WARNING  Unexpected console (no-console)" in out
    assert out.endswith("0 old problems\n1 new problem (0 errors) (1 warning)\n")


def test_missing_file_exit_two(tmp_path, capsys):
    after = _write(tmp_path / "b.json", _eslint([]))
    assert cli.main([str(tmp_path / "missing.json"), after]) == 2
    assert capsys.readouterr().out == ""


def test_malformed_json_exit_two(tmp_path, capsys):
    bad = tmp_path / "bad.json"
    bad.write_text("not json", encoding="utf-8")
    after = _write(tmp_path / "b.json", _eslint([]))
    assert cli.main([str(bad), after]) == 2
    assert capsys.readouterr().out == ""


def test_unsupported_format_exit_two(tmp_path, capsys):
    before = _write(tmp_path / "a.json", {"messages": []})
    after = _write(tmp_path / "b.json", _eslint([]))
    assert cli.main([before, after]) == 2
    assert capsys.readouterr().out == ""


def test_missing_arguments_is_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 2


def test_color_always(tmp_path, capsys):
    before = _write(tmp_path / "a.json", _eslint([]))
    after = _write(tmp_path / "b.json", _eslint([_UNUSED]))
    with patch("lint_diff.cli.config.COLOR_MODE", "always"):
        assert cli.main([before, after]) == 1
    assert "\x1b[31mNEW ERROR   \x1b[0m" in capsys.readouterr().out


# ===================================================================
# Color resolution
# ===================================================================
class _TTY(io.StringIO):
    def isatty(self):
        return True


class TestUseColor:

    def test_auto_on_tty(self):
        assert cli.use_color(_TTY(), "auto") is True

    def test_auto_on_pipe(self):
        assert cli.use_color(io.StringIO(), "auto") is False

    def test_always(self):
        assert cli.use_color(io.StringIO(), "always") is True

    def test_never(self):
        assert cli.use_color(_TTY(), "never") is False
