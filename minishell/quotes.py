"""Tracking of single and double quote state while scanning shell input."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class QuoteState:
    """Whether the scanner is currently inside single or double quotes."""

    in_single: bool = False
    in_double: bool = False

    def toggle(self, char: str) -> bool:
        """Update the state for ``char``; True if it was an active quote mark.

        A single quote inside double quotes, or a double quote inside single
        quotes, is ordinary text and leaves the state unchanged.
        """
        if char == "'" and not self.in_double:
            self.in_single = not self.in_single
            return True
        if char == '"' and not self.in_single:
            self.in_double = not self.in_double
            return True
        return False

    def is_open(self) -> bool:
        """True while any quote is still open."""
        return self.in_single or self.in_double


def tabs_to_spaces(text: str) -> str:
    """Replace every tab with a space."""
    return text.replace("\t", " ")


def count_characters(text: str) -> int:
    """Count the characters of ``text`` that are not active quote marks."""
    state = QuoteState()
    return sum(1 for char in text if not state.toggle(char))