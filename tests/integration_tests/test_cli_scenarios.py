# tests/integration_tests/test_cli_scenarios.py
# This file is part of Causa - Causality Tracking for Replicated Data
#
# End-to-end scenarios for the run_causality command line

"""End-to-end tests for the `run_causality` command line.

Each scenario drives `main()` with an argument list, as a shell would, and
checks both the printed result and the exit code.
"""

import io
import logging

import pytest

import run_causality
from causa_utils import history_reader
from run_causality import (
    EXIT_CONFLICTS,
    EXIT_HISTORY_ERROR,
    EXIT_NOTATION_ERROR,
    EXIT_OK,
    main,
)
from causa_utils.logger import CausaFormatter, LogLevel, get_logger, set_log_level


@pytest.fixture(autouse=True)
def restore_log_level():
    yield
    set_log_level(LogLevel.INFO)


class TestCompareCommand:

    @pytest.mark.parametrize(
        "left, right, expected",
        [
            ("{A:2, B:1}", "{A:1, B:2}", "CONCURRENT"),
            ("{A:2, B:3, C:2}", "{A:3, B:4, C:2}", "BEFORE"),
            ("{A:3, B:4, C:2}", "{A:2, B:3, C:2}", "AFTER"),
            ("{A:1, B:0}", "{A:1}", "EQUAL"),
        ],
    )
    def test_compare(self, capsys, left, right, expected):
        assert main(["compare", left, right]) == EXIT_OK
        assert capsys.readouterr().out.strip() == expected

    def test_compare_rejects_dot(self, capsys):
        assert main(["compare", "A:1", "{A:1}"]) == EXIT_NOTATION_ERROR
        assert "CONCURRENT" not in capsys.readouterr().out


class TestMergeCommand:

    def test_merge_two(self, capsys):
        assert main(["merge", "{A:2, B:1}", "{A:1, B:2}"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "{A:2, B:2}"

    def test_merge_many_with_quoted_ids(self, capsys):
        assert main(["merge", '{"node 1":1}', "{B:4}", '{"node 1":3}']) == EXIT_OK
        assert capsys.readouterr().out.strip() == '{B:4, "node 1":3}'

    def test_merge_syntax_error(self):
        assert main(["merge", "{A:1", "{B:1}"]) == EXIT_NOTATION_ERROR

    def test_merge_requires_a_vector(self):
        with pytest.raises(SystemExit):
            main(["merge"])


class TestSeenCommand:

    @pytest.mark.parametrize(
        "dot, expected",
        [("A:1", "seen"), ("A:2", "seen"), ("A:3", "unseen"), ("Z:1", "unseen"), ("Z:0", "seen")],
    )
    def test_seen(self, capsys, dot, expected):
        assert main(["seen", "{A:2, B:1}", dot]) == EXIT_OK
        assert capsys.readouterr().out.strip() == expected

    def test_seen_rejects_vector_as_dot(self):
        assert main(["seen", "{A:2}", "{A:1}"]) == EXIT_NOTATION_ERROR


class TestHistoryCommand:

    def test_history_reports_conflicts(self, capsys, write_history):
        path = write_history(
            "# replicas: A|B\n"
            "name,vector\n"
            "s1,A:2;B:1\n"
            's2,"{A:1, B:2}"\n'
            "s3,A:2;B:2\n"
        )
        assert main(["history", path]) == EXIT_CONFLICTS
        out = capsys.readouterr().out
        assert "s1 ‖ s2: {A:2, B:1} {A:1, B:2}" in out
        assert "s3" not in out

    def test_history_without_conflicts(self, capsys, write_history):
        path = write_history("name,vector\ns1,A:1\ns2,A:1;B:1\n")
        assert main(["-v", "history", path]) == EXIT_OK

    def test_history_validate_only(self, write_history):
        path = write_history("name,vector\ns1,A:1\ns2,B:1\n")
        assert main(["history", path, "--validate-only"]) == EXIT_OK

    def test_history_bad_file(self, write_history):
        path = write_history("name,vector\ns1,A:oops\n")
        assert main(["--debug", "history", path]) == EXIT_HISTORY_ERROR

    def test_history_missing_file(self, tmp_path):
        assert main(["history", str(tmp_path / "nope.csv")]) == EXIT_HISTORY_ERROR

    def test_history_error_reported_once(self, write_history):
        path = write_history("name,vector\ns1,A:oops\n")
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(CausaFormatter())
        get_logger().logger.addHandler(handler)
        try:
            assert main(["history", path]) == EXIT_HISTORY_ERROR
        finally:
            get_logger().logger.removeHandler(handler)
        out = stream.getvalue()
        assert out.count("row 2") == 1
        assert out.startswith("History file error:")

    def test_history_parses_file_once(self, monkeypatch, write_history):
        calls = []
        original = history_reader.read_history

        def counting_read(filepath):
            calls.append(filepath)
            return original(filepath)

        monkeypatch.setattr(history_reader, "read_history", counting_read)
        path = write_history("name,vector\ns1,A:1\ns2,B:1\n")
        assert main(["history", path]) == EXIT_CONFLICTS
        assert calls == [path]


def test_argument_parser_lists_commands():
    parser = run_causality.create_argument_parser()
    help_text = parser.format_help()
    for command in ("compare", "merge", "seen", "history"):
        assert command in help_text
