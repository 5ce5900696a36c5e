"""Diagnostic output for ecwid_api.

The library never writes to stdout.  Every diagnostic (debug traces of
requests, warnings, errors) goes to stderr through an
:class:`OutputManager`:

* **Rich formatting** -- a :class:`rich.console.Console` bound to stderr
  renders coloured messages.
* **Colour control** -- respects ``NO_COLOR`` and ``TERM=dumb``.
* **Verbosity** -- ``debug`` messages are shown only when ``verbose`` is
  enabled; ``info`` messages are suppressed by ``quiet``.

Applications install their own manager with :func:`set_output`; library
code fetches the active one with :func:`get_output`.  The default manager
is created lazily and keeps debug output off.

Example::

    from ecwid_api.output import OutputManager, set_output

    set_output(OutputManager(verbose=True))
"""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.markup import escape


class OutputManager:
    """Stderr diagnostics with quiet/verbose filtering.

    Args:
        no_color: Disable all colour and Rich markup.
        quiet: Suppress informational messages.
        verbose: Enable debug-level messages.
        stream: Destination stream; defaults to ``sys.stderr``.
    """

    def __init__(
        self,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        self._verbose = verbose
        self._stream = stream if stream is not None else sys.stderr
        self._console = Console(
            file=self._stream,
            no_color=self._no_color,
            stderr=stream is None,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    @property
    def is_quiet(self) -> bool:
        """Whether quiet mode is enabled."""
        return self._quiet

    @property
    def is_verbose(self) -> bool:
        """Whether verbose mode is enabled."""
        return self._verbose

    def info(self, message: str) -> None:
        """Print an informational message. Suppressed by ``quiet``."""
        if not self._quiet:
            self._emit(message, None)

    def warning(self, message: str) -> None:
        """Print a yellow warning. NOT suppressed by ``quiet``."""
        if self._no_color:
            self._emit(f"Warning: {message}", None)
        else:
            self._console.print(f"[yellow]Warning:[/yellow] {escape(message)}", markup=True)

    def error(self, message: str) -> None:
        """Print a bold-red error. Never suppressed."""
        if self._no_color:
            self._emit(f"Error: {message}", None)
        else:
            self._console.print(f"[bold red]Error:[/bold red] {escape(message)}", markup=True)

    def debug(self, message: str) -> None:
        """Print a debug message. Only shown when ``verbose`` is active.

        Args:
            message: The debug text (prefixed with ``[debug]`` on output).
        """
        if self._verbose:
            self._emit(f"[debug] {message}", "dim")

    def _emit(self, message: str, style: Optional[str]) -> None:
        if self._no_color:
            print(message, file=self._stream, flush=True)
        else:
            # Messages carry URLs and payload fragments; never parse them as markup.
            self._console.print(message, style=style, markup=False)


def _should_disable_color() -> bool:
    """Return True when NO_COLOR is set (any value) or TERM=dumb."""
    if os.environ.get("NO_COLOR") is not None:
        return True
    if os.environ.get("TERM") == "dumb":
        return True
    return False


# ------------------------------------------------------------------ #
# Global output instance
# ------------------------------------------------------------------ #

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the global :class:`OutputManager`, creating a default one lazily."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    """Install *output* as the global :class:`OutputManager` instance."""
    global _output
    _output = output


def reset_output() -> None:
    """Reset the global :class:`OutputManager` to ``None``.

    Primarily useful in test suites to ensure a clean state between tests.
    """
    global _output
    _output = None
