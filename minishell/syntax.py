"""Syntax checks on raw command lines and on pipe-separated command lists."""

from __future__ import annotations

from collections.abc import Sequence

SYNTAX_ERROR_STATUS = 2


class ShellSyntaxError(ValueError):
    """A command line is malformed; the shell's exit status becomes 2."""

    status = SYNTAX_ERROR_STATUS


def check_quotes(text: str) -> bool:
    """True if both single and double quote characters occur an even number of times."""
    return text.count("'") % 2 == 0 and text.count('"') % 2 == 0


def check_redir_syntax(text: str) -> bool:
    """False if the line starts with a redirection or holds ``><``, ``<<`` or ``<>``."""
    if text[:1] in ("<", ">"):
        return False
    return not any(pair in text for pair in ("><", "<<", "<>"))


def check_pipe_syntax(text: str) -> bool:
    """False if the line starts or ends with ``|`` or holds ``||``."""
    return not (text.startswith("|") or text.endswith("|") or "||" in text)


def check_syntax(text: str) -> None:
    """Raise ShellSyntaxError for unbalanced quotes, bad redirections or bad pipes."""
    if not check_quotes(text):
        raise ShellSyntaxError("Error: unbalanced quotes.")
    if not check_redir_syntax(text):
        raise ShellSyntaxError("Error: invalid redirection syntax.")
    if not check_pipe_syntax(text):
        raise ShellSyntaxError("Error: invalid pipe syntax.")


def _is_blank(text: str) -> bool:
    return all(char in " \t" for char in text)


def check_pipes(commands: Sequence[str], position: int) -> None:
    """Check the pipe token that follows ``commands[position]``.

    Raises ShellSyntaxError when the pipe has nothing after it, when it
    follows an empty first command, or when it is directly followed by
    another pipe.
    """
    pipe = position + 1
    if pipe >= len(commands):
        return
    token = commands[pipe]
    following = commands[pipe + 1] if pipe + 1 < len(commands) else None
    if token.startswith("|") and (following is None or _is_blank(following)):
        raise ShellSyntaxError("Syntax error near unexpected token 'newline'")
    if pipe == 1 and commands[position] == "":
        if token.startswith("|"):
            raise ShellSyntaxError("Syntax error near unexpected token '|'")
    elif token.startswith("|") and following is not None and following.startswith("|"):
        raise ShellSyntaxError("Syntax error near unexpected token '|'")