# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for Flagkit CLI applications."""
from rich.console import Console

console = Console(highlight=False)
error_console = Console(stderr=True, highlight=False)
