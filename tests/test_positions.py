from qmlkit.positions import Position, Range, byte_offset_to_position, position_to_byte

CONTENT = b"import QtQuick\n\nRectangle {\n    width: 100\n}\n"


def test_round_trip_every_offset():
    for offset in range(len(CONTENT) + 1):
        pos = byte_offset_to_position(CONTENT, offset)
        assert position_to_byte(CONTENT, pos) == offset


def test_offsets_after_newline_start_a_line():
    for index, byte in enumerate(CONTENT):
        if byte == ord("\n"):
            pos = byte_offset_to_position(CONTENT, index + 1)
            assert pos.character == 0
            assert pos.line == CONTENT[: index + 1].count(b"\n")


def test_worked_example():
    assert byte_offset_to_position(b"ab\ncd", 4) == Position(1, 1)


def test_character_clamps_to_line_end():
    assert position_to_byte(CONTENT, Position(0, 1000)) == CONTENT.index(b"\n")


def test_line_past_end_clamps_to_content_length():
    assert position_to_byte(CONTENT, Position(1000, 0)) == len(CONTENT)


def test_offset_past_end_clamps():
    assert byte_offset_to_position(CONTENT, len(CONTENT) + 10) == byte_offset_to_position(
        CONTENT, len(CONTENT)
    )


def test_last_line_without_newline():
    content = b"one\ntwo"
    assert position_to_byte(content, Position(1, 99)) == len(content)


def test_str_and_bytes_agree():
    text = CONTENT.decode()
    for offset in range(len(CONTENT) + 1):
        assert byte_offset_to_position(text, offset) == byte_offset_to_position(CONTENT, offset)


def test_range_defaults_to_origin():
    rng = Range()
    assert rng.start == byte_offset_to_position(CONTENT, 0)
    assert rng.end == rng.start