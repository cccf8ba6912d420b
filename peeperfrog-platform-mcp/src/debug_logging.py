# Copyright (c) 2025 PeeperFrog Press
# Licensed under the Apache License, Version 2.0. See LICENSE file for details.
"""
Debug logging for the MCP server.

Messages always go to stderr (stdout carries the MCP protocol). When debug is
enabled they are also appended to a log file. Every line is passed through
redact_text first so API keys never land in a log.
"""

import sys
from datetime import datetime

from security_utils import redact_text

_debug_enabled = False
_debug_log_path = None


def configure_debug_log(enabled, log_path=None):
    global _debug_enabled, _debug_log_path
    _debug_enabled = bool(enabled)
    _debug_log_path = log_path


def debug_log(message, level="INFO"):
    """Log a redacted message to stderr, and to the debug file when enabled."""
    message = redact_text(str(message))
    print(f"[{level}] {message}", file=sys.stderr)
    if not _debug_enabled or not _debug_log_path:
        return
    try:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        with open(_debug_log_path, "a") as f:
            f.write(f"[{timestamp}] [{level}] {message}\n")
    except OSError as e:
        print(f"[ERROR] Could not write debug log {_debug_log_path}: {e}", file=sys.stderr)
