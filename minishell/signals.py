"""Signal handling for the interactive prompt."""

from __future__ import annotations

import signal
import sys

signal_received = False


def _handle_sigint(signum: int, frame: object) -> None:
    """Drop the line being typed and move on to a fresh prompt."""
    global signal_received
    signal_received = True
    sys.stdout.write("\n")
    sys.stdout.flush()
    raise KeyboardInterrupt


def setup_signals() -> None:
    """Interrupt the prompt on SIGINT and ignore SIGQUIT."""
    signal.signal(signal.SIGINT, _handle_sigint)
    signal.signal(signal.SIGQUIT, signal.SIG_IGN)


def reset_signals() -> None:
    """Restore the default actions for SIGINT and SIGQUIT."""
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    signal.signal(signal.SIGQUIT, signal.SIG_DFL)