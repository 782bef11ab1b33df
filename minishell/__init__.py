"""Parts of a small shell: environment, quoting, expansion, history, syntax checks and redirection."""

__version__ = "0.1.0"