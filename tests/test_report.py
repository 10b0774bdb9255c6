from __future__ import annotations

from chktiles.report import ConsoleSink, Severity, error, warning


def test_line_keeps_non_ascii_path() -> None:
    line = error("tiles/forêt.svg", "E2004_IDENTIFIER_MISSING", "identifier missing").format_line()
    assert line == '"tiles/forêt.svg"\tERROR\tidentifier missing'


def test_line_escapes_quotes_and_tabs() -> None:
    line = warning('tiles/a "b"\tc.svg', "W3001_DUPLICATE_NAME", "duplicate filename: x").format_line()
    assert line.startswith('"tiles/a \\"b\\"\\tc.svg"\tWARNING\t')


def test_console_sink_echoes_lines() -> None:
    lines: list[str] = []
    sink = ConsoleSink(echo=lines.append)
    diagnostic = error("t.svg", "E2001_KEYWORDS_MISSING", "keywords missing")
    sink.emit(diagnostic)
    assert diagnostic.severity is Severity.ERROR
    assert lines == ['"t.svg"\tERROR\tkeywords missing']
