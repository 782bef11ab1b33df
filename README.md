# minishell

A small shell needs several parts. This plain Python library provides them:

- `minishell.env`: an ordered `Environment` of shell variables, with `get`, `lookup`,
  `set`, `delete`, `items` and `is_null_reference`. It can be built from an inherited
  environment with `from_environ`, which also sets `?` and an incremented `SHLVL`.
  When nothing is inherited, `default_environment` builds defaults that set `SHLVL`,
  `PWD`, `OLDPWD`, `HOME`, `_` and `?`. The module also has the helpers `trim_quotes`
  and `init_shlvl`.
- `minishell.quotes`: `QuoteState` tracks single and double quotes while a line is
  scanned. The helpers `tabs_to_spaces` and `count_characters` are here too.
- `minishell.expansion`: `expand_input` expands `$NAME` and `$?` in command lines, and
  `expand_heredoc_line` does the same for here-document lines. Quotes are removed with
  `remove_quotes`, `delete_quotes` and `delete_quotes_all`. An unclosed quote raises
  `UnclosedQuoteError` and sets `?` to 2. A newline inside the line raises
  `NewlineInInputError` and sets `?` to 1.
- `minishell.syntax`: checks for quotes, redirections and pipes (`check_quotes`,
  `check_redir_syntax`, `check_pipe_syntax`). `check_syntax` and `check_pipes` raise
  `ShellSyntaxError`, whose `status` is 2.
- `minishell.redirect`: `open_infile` opens an input file. `redirect_stdin` and
  `redirect_stdout` point the process's standard input or output at a file.
  `handle_redirection` applies a command's `infile` and `outfile`. Failures raise
  `RedirectionError`.
- `minishell.history`: a `History` of entered lines, with `load`, `add` and `entries`.
  Lines are appended to a file. By default the file is `$HOME/minishell_history`, as
  given by `default_history_path`.
- `minishell.linereader`: `LineReader` and `read_lines` read complete,
  newline-terminated lines from a text stream in fixed-size chunks.
- `minishell.strutil`: small string helpers that follow C-library semantics: `atoi`,
  `itoa`, `split_words`, `strtrim`, `substr`, `strnstr`, `strncmp` and `is_alnum`.
- `minishell.session`: a `Shell` that holds the environment, the history and the list
  of `Command` objects for the current line. It can append and clear commands, set the
  exit status, update `_` and `?` (`set_special_var`), and expand a command's parts and
  remove their quotes (`strip_command_quotes`).

## What it does not do

This is a library, not a runnable shell. It has no command-line program and no
interactive prompt loop. It does not turn a line into `Command` objects, because it has
no tokenizer or pipeline splitter. It does not run programs, connect pipes, read
here-documents, or provide builtins such as `cd`, `echo`, `export` or `exit`.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from minishell.env import from_environ
from minishell.expansion import expand_input, remove_quotes

env = from_environ({"USER": "alice"}, 0)
line = expand_input(env, "echo '$USER' \"$USER\"")
print(remove_quotes(line))  # echo $USER alice
```