"""Variable expansion and quote removal for command lines and here-documents."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .env import Environment
from .quotes import QuoteState, tabs_to_spaces

_INPUT_VARIABLE = re.compile(r"\$(\??[A-Za-z0-9_]*)")
_HEREDOC_NAME = re.compile(r"[A-Za-z0-9_]*")


class UnclosedQuoteError(ValueError):
    """A command line ended inside quotes."""

    def __init__(self, quote: str) -> None:
        kind = "single" if quote == "'" else "double"
        super().__init__(f"minishell: unclosed {kind} quote")
        self.quote = quote


class NewlineInInputError(ValueError):
    """A command line contained a newline."""


def _expands_here(text: str, i: int) -> bool:
    return text[i] == "$" and text[i + 1:i + 2] not in ("", " ", "$")


def expand_input(env: Environment, text: str) -> str | None:
    """Expand variables in a command line, keeping its quote marks.

    Tabs become spaces and leading spaces are dropped. An unquoted value is
    wrapped in double quotes; unset unquoted variables vanish. Returns None if
    nothing is left. Raises NewlineInInputError (setting ``?`` to 1) or
    UnclosedQuoteError (setting ``?`` to 2).
    """
    if "\n" in text:
        env.set("?", "1")
        raise NewlineInInputError("warning: newline at end of input")
    text = tabs_to_spaces(text).lstrip(" ")
    state = QuoteState()
    out: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if state.toggle(char):
            out.append(char)
            i += 1
            continue
        if not state.in_single and _expands_here(text, i):
            match = _INPUT_VARIABLE.match(text, i)
            value = env.lookup(match.group(1))
            i = match.end()
            if value is not None:
                out.append(value if state.is_open() else f'"{value}"')
            continue
        out.append(char)
        i += 1
    if state.is_open():
        env.set("?", "2")
        raise UnclosedQuoteError("'" if state.in_single else '"')
    return "".join(out) or None


def expand_heredoc_line(env: Environment, text: str, last_status: int) -> str:
    """Expand variables in a here-document line; quotes have no meaning here.

    ``$?`` gives ``last_status``. After an unset variable the next character
    is copied as it is.
    """
    out: list[str] = []
    i = 0
    while i < len(text):
        if _expands_here(text, i):
            if text[i + 1] == "?":
                value: str | None = str(last_status)
                i += 2
            else:
                match = _HEREDOC_NAME.match(text, i + 1)
                value = env.lookup(match.group())
                i = match.end()
            out.append(value or "")
            if value is not None:
                continue
            if i >= len(text):
                break
        out.append(text[i])
        i += 1
    return "".join(out)


def remove_quotes(text: str) -> str:
    """Remove the quote marks that open or close a quoted section."""
    state = QuoteState()
    return "".join(char for char in text if not state.toggle(char))


def delete_quotes(env: Environment, text: str, expand: bool) -> str | None:
    """Optionally expand ``text``, then remove its quote marks.

    Returns None when expansion leaves nothing.
    """
    if expand:
        expanded = expand_input(env, text)
        if expanded is None:
            return None
        text = expanded
    return remove_quotes(text)


def delete_quotes_all(
    env: Environment, items: Iterable[str], expand: bool
) -> list[str]:
    """Apply delete_quotes to each item, dropping those that vanish."""
    results = (delete_quotes(env, item, expand) for item in items)
    return [result for result in results if result is not None]