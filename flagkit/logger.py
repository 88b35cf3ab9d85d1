# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Flagkit."""
import logging

logger: logging.Logger = logging.getLogger("flagkit")
