# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals raised by the Flagkit argument parser.

Signals are not errors. They inherit from `FlowSignal`, a subclass of
`BaseException`, so they pass straight through `except Exception` blocks and
reach the caller that knows how to handle them.

Signals:
- HelpSignal: `-h` or `--help` was given; show usage and exit cleanly.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Flagkit."""


class HelpSignal(FlowSignal):
    """Raised when the user asked for help on the command line."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)
