"""Unit tests for the public search API."""

import io
from pathlib import Path

import pytest
from utils import INVALID_UTF8, strip_ansi

from minigrep import SearchConfig, resolve_exit_code, search_and_render, search_path
from minigrep.exceptions import PatternError
from minigrep.options import OutputOptions, SearchOptions
from minigrep.search.pattern import compile_pattern


def _render(config, **kwargs):
    stream = io.StringIO()
    code = search_and_render(config, stream=stream, **kwargs)
    return code, stream.getvalue()


@pytest.mark.unit
class TestSearchPath:
    """Test search_path."""

    def test_directory(self, code_tree):
        results = search_path(compile_pattern("fn "), code_tree)
        assert sorted(Path(entry.path).name for entry in results) == ["lib.rs", "main.rs"]

    def test_stdin_stream(self):
        stream = io.BytesIO(b"one\nneedle two\nthree needle\n")
        results = search_path(compile_pattern("needle"), "-", stdin=stream)

        assert len(results) == 1
        assert results[0].display_name == "(standard input)"
        assert [m.line_number for m in results[0].matches] == [2, 3]

    def test_stdin_without_match(self):
        assert search_path(compile_pattern("needle"), "-", stdin=io.BytesIO(b"hay\n")) == []

    def test_undecodable_stdin_is_reported_and_skipped(self):
        events = []
        results = search_path(
            compile_pattern("needle"), "-", stdin=io.BytesIO(INVALID_UTF8), progress_callback=events.append
        )
        assert results == []
        assert [(e.event_type, e.metadata["reason"]) for e in events] == [("skipped", "decode")]

    def test_options_encoding_is_used(self, tmp_path):
        (tmp_path / "latin.txt").write_bytes("naïve needle\n".encode("latin-1"))
        pattern = compile_pattern("needle")

        assert search_path(pattern, tmp_path) == []
        results = search_path(pattern, tmp_path, SearchOptions(encoding="latin-1"))
        assert results[0].matches[0].line == "naïve needle"


@pytest.mark.unit
class TestResolveExitCode:
    """Test the exit policy."""

    @pytest.mark.parametrize(
        "policy,quiet,found,expected",
        [
            ("auto", False, True, 0),
            ("auto", False, False, 0),
            ("auto", True, True, 0),
            ("auto", True, False, 1),
            ("display", True, False, 0),
            ("discovery", False, False, 1),
            ("discovery", False, True, 0),
        ],
    )
    def test_policies(self, policy, quiet, found, expected):
        options = OutputOptions(exit_policy=policy, quiet=quiet)
        assert resolve_exit_code(found, options) == expected


@pytest.mark.unit
class TestSearchAndRender:
    """Test search_and_render end to end."""

    def test_fn_example(self, fn_file):
        code, output = _render(SearchConfig("fn ", fn_file))

        assert code == 0
        assert output.splitlines() == [
            f"-- {fn_file.as_posix()} --",
            "0001] \x1b[31mfn \x1b[0mmain() {",
            "0003] \x1b[31mfn \x1b[0mhelper() {}",
        ]

    def test_files_are_sorted_by_path(self, code_tree):
        config = SearchConfig("fn ", code_tree, output=OutputOptions(color=False))
        _, output = _render(config)

        headers = [line for line in output.splitlines() if line.startswith("-- ")]
        assert headers == [
            f"-- {(code_tree / 'main.rs').as_posix()} --",
            f"-- {(code_tree / 'src' / 'lib.rs').as_posix()} --",
        ]

    def test_empty_pattern_prints_nothing(self, code_tree):
        code, output = _render(SearchConfig("", code_tree))
        assert code == 0
        assert output == ""

    def test_quiet_reports_through_exit_code(self, code_tree):
        quiet = OutputOptions(quiet=True)
        assert _render(SearchConfig("fn ", code_tree, output=quiet)) == (0, "")
        assert _render(SearchConfig("absent", code_tree, output=quiet)) == (1, "")

    def test_count(self, code_tree):
        config = SearchConfig("fn ", code_tree, output=OutputOptions(color=False, show_count=True))
        _, output = _render(config)
        assert output.splitlines()[-1] == "Number of matches: 3"

    def test_count_across_two_files(self, tmp_path):
        (tmp_path / "a.txt").write_text("needle\nhay\n", encoding="utf-8")
        (tmp_path / "b.txt").write_text("hay\nneedle needle\n", encoding="utf-8")
        config = SearchConfig("needle", tmp_path, output=OutputOptions(color=False, show_count=True))

        _, output = _render(config)

        lines = output.splitlines()
        assert len([line for line in lines if line.startswith("-- ")]) == 2
        assert lines[-1] == "Number of matches: 2"

    def test_stdin(self):
        config = SearchConfig("b", "-", output=OutputOptions(color=False))
        code, output = _render(config, stdin=io.BytesIO(b"abc\nxyz\n"))

        assert code == 0
        assert output.splitlines() == ["-- (standard input) --", "0001] abc"]

    def test_case_insensitive_regex(self, tmp_path):
        (tmp_path / "todo.txt").write_text("TODO: one\nnothing\nfixme later\n", encoding="utf-8")
        config = SearchConfig(
            "todo|fixme",
            tmp_path,
            search=SearchOptions(case_insensitive=True, use_regex=True),
            output=OutputOptions(color=False),
        )
        _, output = _render(config)
        assert output.splitlines()[1:] == ["0001] TODO: one", "0003] fixme later"]

    def test_invalid_regex_fails_before_walking(self, code_tree):
        events = []
        config = SearchConfig("(", code_tree, search=SearchOptions(use_regex=True))

        with pytest.raises(PatternError):
            search_and_render(config, stream=io.StringIO(), progress_callback=events.append)
        assert events == []

    def test_rich_output(self, fn_file):
        config = SearchConfig("fn ", fn_file, output=OutputOptions(rich=True, show_count=True))
        code, output = _render(config)

        assert code == 0
        lines = strip_ansi(output).splitlines()
        assert lines[0] == f"-- {fn_file.as_posix()} --"
        assert lines[1] == "0001] fn main() {"
        assert lines[-1] == "Number of matches: 2"

    def test_rich_quiet_prints_nothing(self, fn_file):
        config = SearchConfig("fn ", fn_file, output=OutputOptions(rich=True, quiet=True))
        assert _render(config) == (0, "")

    def test_search_config_to_query(self):
        config = SearchConfig("x", search=SearchOptions(case_insensitive=True))
        query = config.to_query()
        assert query.raw_text == "x"
        assert query.case_insensitive
        assert not query.use_regex
