"""Tests for output renderers and sinks."""

import io
import json

from rich.console import Console

from nanodiff.diff.models import DiffLine, DiffLineType, DiffResult
from nanodiff.diff.sinks import DiffStats, tee
from nanodiff.output import json_report, terminal, unified

C = DiffLineType.CONTEXT
EO = DiffLineType.EXPECTED_ONLY
AO = DiffLineType.ACTUAL_ONLY


def _sample_lines():
    return [DiffLine("c", EO), DiffLine("X", AO), DiffLine("d", C), DiffLine("e", C)]


class TestUnified:
    def test_markers(self):
        assert unified.format_line(DiffLine("same", C)) == " same"
        assert unified.format_line(DiffLine("gone", EO)) == "-gone"
        assert unified.format_line(DiffLine("new", AO)) == "+new"

    def test_empty_line(self):
        assert unified.format_line(DiffLine("", AO)) == "+"

    def test_writer_output(self):
        out = io.StringIO()
        writer = unified.UnifiedWriter(out)
        for line in _sample_lines():
            writer(line)
        assert out.getvalue() == "-c\n+X\n d\n e\n"

    def test_writer_hides_context(self):
        out = io.StringIO()
        writer = unified.UnifiedWriter(out, show_context=False)
        for line in _sample_lines():
            writer(line)
        assert out.getvalue() == "-c\n+X\n"

    def test_writer_header_and_multiple_streams(self):
        first, second = io.StringIO(), io.StringIO()
        writer = unified.UnifiedWriter(first, second)
        writer.write_header("exp.txt", "act.txt")
        writer(DiffLine("x", AO))
        assert first.getvalue() == "--- exp.txt\n+++ act.txt\n+x\n"
        assert second.getvalue() == first.getvalue()


class TestTerminal:
    def _console(self) -> Console:
        return Console(file=io.StringIO(), width=20, force_terminal=False, color_system=None)

    def test_plain_text_when_not_a_terminal(self):
        console = self._console()
        writer = terminal.TerminalWriter(console)
        for line in _sample_lines():
            writer(line)
        assert console.file.getvalue() == "-c\n+X\n d\n e\n"

    def test_markup_and_long_lines_printed_literally(self):
        console = self._console()
        writer = terminal.TerminalWriter(console)
        content = "[bold]not markup[/bold] :smile: " + "x" * 40
        writer(DiffLine(content, AO))
        assert console.file.getvalue() == f"+{content}\n"

    def test_tabs_and_control_characters_unchanged(self):
        console = self._console()
        writer = terminal.TerminalWriter(console)
        lines = [DiffLine("a\tb", AO), DiffLine("\tindented", C), DiffLine("x\ry\x0bz\x0c", EO)]
        for line in lines:
            writer(line)
        assert console.file.getvalue() == "".join(unified.format_line(line) + "\n" for line in lines)

    def test_styles_wrap_unchanged_text(self):
        console = Console(file=io.StringIO(), width=20, force_terminal=True, color_system="standard")
        writer = terminal.TerminalWriter(console)
        writer(DiffLine("a\tb", AO))
        text = console.file.getvalue()
        assert "+a\tb" in text
        assert "\x1b[" in text

    def test_summary(self):
        console = self._console()
        stats = DiffStats(context=2, expected_only=1, actual_only=1)
        terminal.print_summary(console, stats, has_diff=True, mode="eager")
        text = console.file.getvalue()
        assert "eager" in text
        assert "differ" in text


class TestJsonReport:
    def _result(self) -> DiffResult:
        return DiffResult(lines=_sample_lines(), has_diff=True)

    def test_valid_json(self):
        data = json.loads(json_report.render(self._result(), expected_name="e.txt", actual_name="a.txt"))
        assert data["version"] == "1.0"
        assert data["has_diff"] is True
        assert data["expected"] == "e.txt"
        assert data["summary"] == {"context": 2, "expected_only": 1, "actual_only": 1}
        assert data["lines"][0] == {"type": "expected_only", "content": "c"}

    def test_hides_context(self):
        data = json_report.to_dict(
            self._result(), expected_name="e", actual_name="a", show_context=False
        )
        assert [entry["type"] for entry in data["lines"]] == ["expected_only", "actual_only"]
        assert data["summary"]["context"] == 2


class TestSinks:
    def test_stats_counts(self):
        stats = DiffStats()
        for line in _sample_lines():
            stats(line)
        assert (stats.context, stats.expected_only, stats.actual_only) == (2, 1, 1)
        assert stats.total == 4

    def test_tee_preserves_order(self):
        seen = []
        sink = tee(lambda line: seen.append(("a", line.content)), lambda line: seen.append(("b", line.content)))
        sink(DiffLine("1", C))
        sink(DiffLine("2", C))
        assert seen == [("a", "1"), ("b", "1"), ("a", "2"), ("b", "2")]
