"""Parser state: line flags, nested inline tags and buffered output."""

from __future__ import annotations

import enum
from dataclasses import dataclass

MAX_HEADER_LEVEL = 6


class Tag(enum.Enum):
    """Inline formatting that a nested state collects text for."""

    NONE = ""
    ITALIC = "i"
    BOLD = "strong"
    INLINE_CODE = "code"

    def wrap(self, text: str) -> str:
        """Surround ``text`` with this tag's HTML element."""
        if self is Tag.NONE:
            return text
        return f"<{self.value}>{text}</{self.value}>"


@dataclass
class ParserState:
    """State of one level of inline nesting.

    The outermost state also tracks the block-level flags of the current
    line; each open inline tag is a chain of ``substate`` links below it.
    """

    tag: Tag = Tag.NONE
    text: str = ""
    substate: ParserState | None = None
    previous_character: str = ""
    can_parse_header: bool = True
    header_level: int = 0
    opened_tag: bool = False
    first_line: bool = True

    def reset_line_state(self) -> None:
        """Forget the block-level flags of the finished line."""
        self.can_parse_header = True
        self.header_level = 0
        self.opened_tag = False
        self.first_line = True

    def reset_text(self) -> None:
        """Drop the text buffered at this level."""
        self.text = ""

    def nested(self) -> ParserState:
        """Return the innermost open state."""
        state = self
        while state.substate is not None:
            state = state.substate
        return state

    def open_substate(self, tag: Tag) -> ParserState:
        """Open a new innermost state for ``tag`` and return it."""
        child = ParserState(tag)
        self.nested().substate = child
        return child

    def conclude_substate(self, tag: Tag) -> bool:
        """Close the outermost open state for ``tag``.

        Its text, wrapped in the tag's element, is added to its parent; any
        states nested below it are discarded. Returns False when no state
        for ``tag`` is open.
        """
        parent = self
        while parent.substate is not None and parent.substate.tag is not tag:
            parent = parent.substate
        child = parent.substate
        if child is None:
            return False
        parent.text += tag.wrap(child.text)
        parent.substate = None
        return True

    def append_text(self, text: str) -> None:
        """Append markup to this level, ignoring open inline tags."""
        self.text += text

    def append_char(self, ch: str) -> None:
        """Append content to the innermost open state."""
        self.nested().text += ch

    def increase_header_level(self) -> None:
        """Count one more '#', up to the deepest HTML heading."""
        if self.header_level < MAX_HEADER_LEVEL:
            self.header_level += 1