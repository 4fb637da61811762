from smartkeys.context import current_line_bounds, extract_context


def test_last_word_and_line_for_simple_header():
    ctx = extract_context("for ", 4)
    assert ctx.last_word == "for"
    assert ctx.current_line == "for "
    assert ctx.is_new_line is False
    assert ctx.line_indentation == 0


def test_brackets_split_words_and_indentation_counts():
    text = "x = 1\n    foo(bar"
    ctx = extract_context(text, len(text))
    assert ctx.current_line == "    foo(bar"
    assert ctx.last_word == "bar"
    assert ctx.line_indentation == 4


def test_blank_line_is_new_line():
    ctx = extract_context("a\n   \nb", 4)
    assert ctx.current_line == "   "
    assert ctx.last_word == ""
    assert ctx.is_new_line is True
    assert ctx.line_indentation == 3


def test_cursor_in_middle_of_line_uses_text_before_cursor():
    ctx = extract_context("print(x) + y", 5)
    assert ctx.last_word == "print"
    assert ctx.current_line == "print(x) + y"


def test_offsets_out_of_range_are_clamped():
    assert extract_context("abc", -5).last_word == ""
    assert extract_context("abc", 99).last_word == "abc"
    assert extract_context("", 0).is_new_line is True


def test_line_bounds():
    text = "one\ntwo\nthree"
    assert current_line_bounds(text, 5) == (4, 7)
    assert current_line_bounds(text, len(text)) == (8, 13)
