"""Line-oriented conversion of a small Markdown subset to HTML."""

from __future__ import annotations

from collections.abc import Iterable

from mdlite.state import ParserState, Tag


def _block_element(header_level: int) -> str:
    return f"h{header_level}" if header_level else "p"


class MarkdownParser:
    """Converts Markdown fed line by line into HTML."""

    def __init__(self) -> None:
        self._state = ParserState()
        self._chunks: list[str] = []

    def feed_line(self, line: str) -> None:
        """Process one line, including its trailing newline if any."""
        state = self._state
        if not state.first_line:
            if line == "\n":
                self._close_block()
                self._wrap_line()
                return
            state.append_text("<br />")

        for ch in line.split("\0", 1)[0]:
            self._feed_char(ch)

        # A line break always ends a header, but not a paragraph.
        if state.header_level:
            self._close_block()
            self._wrap_line()
        else:
            state.first_line = False

    def finish(self) -> str:
        """Close the open block and return all HTML produced."""
        self._close_block()
        self._wrap_line()
        return "".join(self._chunks)

    def _feed_char(self, ch: str) -> None:
        state = self._state
        nested = state.nested()

        if ch == "#" and state.can_parse_header:
            state.increase_header_level()
            return
        if ch == "_":
            self._toggle(Tag.ITALIC, nested)
            return
        if ch == "`":
            self._toggle(Tag.INLINE_CODE, nested)
            return
        if ch == "*":
            if nested.previous_character == "*":
                if nested.tag is Tag.BOLD:
                    state.conclude_substate(Tag.BOLD)
                    state.nested().previous_character = ""
                else:
                    state.open_substate(Tag.BOLD)
                    nested.previous_character = ""
            else:
                nested.previous_character = "*"
            return
        if ch == "\n":
            nested.previous_character = "\n"
            return

        if state.can_parse_header:
            state.can_parse_header = False
            if ch == " ":
                self._open_block()
            else:
                level = state.header_level
                state.header_level = 0
                self._open_block()
                state.append_char("#" * level)
                state.append_char(ch)
        elif nested.previous_character == "*":
            state.append_char("*")
            state.append_char(ch)
        else:
            state.append_char(ch)

        nested.previous_character = ch

    def _toggle(self, tag: Tag, nested: ParserState) -> None:
        if nested.tag is tag:
            self._state.conclude_substate(tag)
        else:
            self._state.open_substate(tag)

    def _open_block(self) -> None:
        state = self._state
        state.opened_tag = True
        state.append_text(f"<{_block_element(state.header_level)}>")

    def _close_block(self) -> None:
        state = self._state
        if state.opened_tag:
            state.append_text(f"</{_block_element(state.header_level)}>")

    def _wrap_line(self) -> None:
        state = self._state
        self._chunks.append(state.text)
        state.reset_text()
        state.reset_line_state()


def parse_markdown(lines: Iterable[str]) -> str:
    """Convert an iterable of lines, such as a text file, to HTML."""
    parser = MarkdownParser()
    for line in lines:
        parser.feed_line(line)
    return parser.finish()


def markdown_to_html(text: str) -> str:
    """Convert a Markdown string to HTML."""
    *complete, last = text.split("\n")
    lines = [line + "\n" for line in complete]
    if last:
        lines.append(last)
    return parse_markdown(lines)