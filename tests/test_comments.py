import pytest

from blockkit.comments import CommentError, exclude_comments


def strip(text: str) -> str:
    return "".join(exclude_comments(text))


def test_empty():
    assert strip("") == ""


def test_single_char():
    assert strip("0") == "0"


def test_two_chars():
    assert strip("ab") == "ab"


def test_comment():
    assert strip("ab//cd") == "ab"


def test_comments_are_ended_by_new_line():
    assert strip("ab//comment\nde") == "ab\nde"


def test_new_lines_without_comments():
    assert strip("ab\nde") == "ab\nde"


def test_error_on_single_slash():
    with pytest.raises(CommentError, match="isolated"):
        strip("ab/cd")


def test_error_on_trailing_slash():
    with pytest.raises(CommentError, match="isolated"):
        strip("ab/")


def test_line_comments_on_multiple_lines():
    text = (
        "\n"
        "line 1 //comment 1\n"
        "line 2 // comment 2 // comment 3\n"
        "line 3\n"
        "line 4 // comment 4"
    )
    assert strip(text) == "\nline 1 \nline 2 \nline 3\nline 4 "


def test_block_comment():
    assert strip("ab/*comment*/12") == "ab12"


def test_empty_block_comment():
    assert strip("ab/**/12") == "ab12"


def test_block_comment_with_asterisk_and_slash_inside():
    assert strip("ab/*false * asterisk and / */12") == "ab12"


def test_block_comment_within_line_comment():
    assert strip("ab// /*comment*/12") == "ab"


def test_block_comment_not_terminated():
    with pytest.raises(CommentError, match=r"block comment not terminated with \*/"):
        strip("ab /*comment")


def test_block_comment_not_completely_terminated():
    with pytest.raises(CommentError, match=r"block comment not terminated with \*/"):
        strip("ab /*comment*")


def test_block_and_line_comments_on_multiple_lines():
    text = (
        "\n"
        "line 1 /* comment 1 */\n"
        "line /* comment 2 */2 // line comment 1\n"
        "line 3 /* some comments\n"
        "over multiple lines\n"
        "*/\n"
        "line 4 /* more multiline comments\n"
        "* with leading\n"
        "* asterisks\n"
        "*/end// line comment 2"
    )
    assert strip(text) == "\nline 1 \nline 2 \nline 3 \nline 4 end"


def test_bytes_input_yields_byte_values():
    assert bytes(exclude_comments(b"ab/*x*/cd//ef\ngh")) == b"abcd\ngh"


def test_error_is_raised_lazily():
    units = exclude_comments("ab/cd")
    assert next(units) == "a"
    assert next(units) == "b"
    with pytest.raises(CommentError):
        next(units)