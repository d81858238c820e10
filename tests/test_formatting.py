from qmlkit.formatting import (
    FormattingOptions,
    ScanState,
    count_leading_close,
    format_document,
    format_qml,
    format_range,
    indent_unit,
)
from qmlkit.positions import Position, byte_offset_to_position

SPACES = FormattingOptions(tab_size=4, insert_spaces=True)


def test_reindents_braced_blocks():
    text = 'import QtQuick\nRectangle {\nwidth: 100\nText {\ntext: "hi"\n}\n}\n'
    want = 'import QtQuick\nRectangle {\n    width: 100\n    Text {\n        text: "hi"\n    }\n}\n'
    assert format_qml(text, SPACES) == want


def test_trims_trailing_whitespace():
    got = format_qml("Rectangle {   \n    width: 100   \n}   \n", SPACES)
    lines = got.rstrip("\n").split("\n")
    assert lines
    assert all(line == line.rstrip(" \t") for line in lines)


def test_collapses_blank_runs():
    got = format_qml("Rectangle {\n\n\n\n    width: 100\n\n\n}\n", SPACES)
    assert "\n\n\n" not in got
    assert got == "Rectangle {\n\n    width: 100\n\n}\n"


def test_honours_tabs_option():
    got = format_qml("Rectangle {\nwidth: 100\n}\n", FormattingOptions(tab_size=4, insert_spaces=False))
    assert "\twidth: 100" in got


def test_ignores_braces_inside_strings_and_comments():
    text = 'Rectangle {\ntext: "a } b"\n// comment with }\n/* block } closed */\nwidth: 100\n}\n'
    got = format_qml(text, SPACES)
    interior = got.rstrip("\n").split("\n")[1:5]
    assert len(interior) == 4
    for line in interior:
        assert line.startswith("    ")
        assert not line.startswith("        ")


def test_preserves_semantic_content():
    got = format_qml('Rectangle {\nwidth: 100\ntext: "hello world"\n}\n', SPACES)
    for want in ("Rectangle", "width: 100", 'text: "hello world"'):
        assert want in got


def test_ensures_final_newline():
    got = format_qml("Rectangle {\n    width: 100\n}", SPACES)
    assert got.endswith("\n")
    assert not got.endswith("\n\n")


def test_blank_document_formats_to_empty():
    assert format_qml("   \n\n\t\n", SPACES) == ""


def test_format_document_no_change_returns_no_edits():
    doc = "import QtQuick\n\nRectangle {\n    width: 100\n}\n"
    assert format_document(doc, SPACES) == []


def test_format_document_returns_full_replacement():
    doc = "import QtQuick\nRectangle {\nwidth: 100\n}\n"
    edits = format_document(doc, SPACES)
    assert len(edits) == 1
    assert "    width: 100" in edits[0].new_text
    assert edits[0].range.start == Position(0, 0)
    assert edits[0].range.end == byte_offset_to_position(doc, len(doc))


def test_format_range_replaces_selected_lines():
    doc = "Rectangle {\nwidth: 100\n}\n"
    edits = format_range(doc, 0, 1, SPACES)
    assert len(edits) == 1
    assert edits[0].new_text == "Rectangle {\n    width: 100\n"
    assert edits[0].range.start == Position(0, 0)
    assert edits[0].range.end == Position(2, 0)


def test_format_range_start_past_end():
    assert format_range("Rectangle {}\n", 10, 12, SPACES) == []


def test_format_range_already_formatted():
    assert format_range("Rectangle {\n    width: 100\n}\n", 0, 2, SPACES) == []


def test_indent_unit():
    assert indent_unit(FormattingOptions(tab_size=4, insert_spaces=False)) == "\t"
    assert indent_unit(FormattingOptions(tab_size=0, insert_spaces=True)) == " " * 4
    assert indent_unit(FormattingOptions(tab_size=2, insert_spaces=True)) == "  "


def test_count_leading_close():
    assert count_leading_close("}) foo") == 2
    assert count_leading_close("foo }") == 0
    assert count_leading_close("") == 0


def test_scan_line_counts_brackets():
    assert ScanState().scan_line("foo({ bar", 0) == 2
    assert ScanState().scan_line("})", 2) == 0


def test_scan_state_string_spans_lines():
    state = ScanState()
    assert state.scan_line('text: "abc {', 0) == 0
    assert state.in_string == '"'
    assert state.scan_line('def" {', 0) == 1
    assert state.in_string == ""


def test_scan_state_block_comment_spans_lines():
    state = ScanState()
    assert state.scan_line("/* {", 1) == 1
    assert state.in_block_comment
    assert state.scan_line("} */ {", 1) == 2
    assert not state.in_block_comment


def test_scan_state_escaped_quote_keeps_string_open():
    state = ScanState()
    assert state.scan_line(r'"a \" {', 0) == 0
    assert state.in_string == '"'


def test_scan_state_line_comment_resets_each_line():
    state = ScanState()
    assert state.scan_line("// {", 0) == 0
    assert state.scan_line("{", 0) == 1