import pytest

from mdlite.parser import MarkdownParser, markdown_to_html, parse_markdown


def _parse_file(tmp_path, text):
    path = tmp_path / "test.md"
    path.write_text(text, encoding="utf-8")
    with path.open(encoding="utf-8") as handle:
        return parse_markdown(handle)


CASES = [
    ("Hello, world!", "<p>Hello, world!</p>"),
    ("### Hello, world!", "<h3>Hello, world!</h3>"),
    (
        "# Description\nSome text\n\nAnother line",
        "<h1>Description</h1><p>Some text</p><p>Another line</p>",
    ),
    (
        "some text _with italics_ and more",
        "<p>some text <i>with italics</i> and more</p>",
    ),
    (
        "some text `with inline code` and _more_",
        "<p>some text <code>with inline code</code> and <i>more</i></p>",
    ),
    (
        "some text **with bold text** and _more_",
        "<p>some text <strong>with bold text</strong> and <i>more</i></p>",
    ),
]


@pytest.mark.parametrize("source, expected", CASES)
def test_file_cases(tmp_path, source, expected):
    assert _parse_file(tmp_path, source) == expected


@pytest.mark.parametrize("source, expected", CASES)
def test_string_cases(source, expected):
    assert markdown_to_html(source) == expected


def test_incremental_feeding_matches_whole_text():
    source = "# Description\nSome text\n\nAnother line"
    parser = MarkdownParser()
    for line in ["# Description\n", "Some text\n", "\n", "Another line"]:
        parser.feed_line(line)
    assert parser.finish() == markdown_to_html(source)


def test_consecutive_paragraph_lines_get_line_break():
    assert markdown_to_html("one\ntwo") == "<p>one<br />two</p>"


def test_header_level_is_capped_at_six():
    assert markdown_to_html("######## deep") == "<h6>deep</h6>"


def test_hashes_without_space_are_text():
    assert markdown_to_html("#tag") == "<p>#tag</p>"


def test_single_star_is_literal():
    assert markdown_to_html("a*b") == "<p>a*b</p>"


def test_consecutive_headers():
    assert markdown_to_html("# A\n## B") == "<h1>A</h1><h2>B</h2>"


def test_non_ascii_text_passes_through():
    assert markdown_to_html("héllo _wörld_") == "<p>héllo <i>wörld</i></p>"


def test_empty_input_gives_empty_output():
    assert markdown_to_html("") == ""
    assert parse_markdown([]) == ""


def test_trailing_newline_does_not_change_output():
    assert markdown_to_html("Hello, world!\n") == markdown_to_html("Hello, world!")


def test_italic_at_line_start():
    assert markdown_to_html("_abc_") == "<p><i>abc</i></p>"