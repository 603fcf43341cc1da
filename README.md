# mdlite

mdlite turns a small subset of Markdown into compact HTML. It reads one line at a
time and needs no third-party packages.

## Supported syntax

- Headers `#` to `######` followed by a space. A header ends at the end of its
  line and becomes `<h1>` to `<h6>`. More than six `#` still gives `<h6>`.
  A run of `#` at the start of a line that is not followed by a space is kept
  as text in a paragraph.
- Paragraphs. Lines that follow one another are joined with `<br />`, and a
  blank line ends the paragraph. Each paragraph becomes `<p>...</p>`.
- `_italic_` becomes `<i>italic</i>`.
- `` `code` `` becomes `<code>code</code>`.
- `**bold**` becomes `<strong>bold</strong>`.

The output has no newlines between blocks.

## Installation

```
pip install .
```

## Usage

Convert a whole string with `mdlite.parser.markdown_to_html`:

```python
from mdlite.parser import markdown_to_html

html = markdown_to_html("# Description\nSome text\n\nAnother line")
# '<h1>Description</h1><p>Some text</p><p>Another line</p>'
```

Convert any iterable of lines, for example an open file, with
`mdlite.parser.parse_markdown`:

```python
from mdlite.parser import parse_markdown

with open("notes.md", encoding="utf-8") as handle:
    html = parse_markdown(handle)
```

Feed lines one at a time with `mdlite.parser.MarkdownParser`, then call
`finish()` to close the open block and get the HTML:

```python
from mdlite.parser import MarkdownParser

parser = MarkdownParser()
parser.feed_line("some text **with bold text** and _more_")
html = parser.finish()
# '<p>some text <strong>with bold text</strong> and <i>more</i></p>'
```

Each line passed to `feed_line` keeps its trailing newline, the way lines come
out of a file.

The module `mdlite.state` holds the parser's working state: the `Tag` enum of
inline formats and the `ParserState` dataclass that buffers text for each open
inline tag.

## Limitations

- Only the syntax listed above is recognised: there are no lists, links,
  images, block quotes or fenced code blocks.
- Characters such as `<` and `&` are copied to the output unescaped.
- Text after an opening `_`, `` ` `` or `**` that is never closed stays
  buffered and does not appear in the output.
- There is no command-line tool; the converter is used from Python only.

## Running the tests

```
pip install ".[test]"
pytest
```