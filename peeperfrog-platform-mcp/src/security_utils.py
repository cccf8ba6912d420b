# Copyright (c) 2025 PeeperFrog Press
# Licensed under the Apache License, Version 2.0. See LICENSE file for details.
"""
Input validation and redaction for the platform image server.

Validators return a result dict instead of raising:
    {"valid": bool, "sanitized": str (optional), "error": str (optional)}

Redaction is best-effort pattern matching. It catches the key formats we know
about, not every secret that could end up in an error message.
"""

import os
import re

# Maximum prompt length to prevent abuse
MAX_PROMPT_LENGTH = 4000

# Minimum prompt length for meaningful generation
MIN_PROMPT_LENGTH = 3

# Checked in order, first match wins
SUSPICIOUS_PATTERNS = [
    re.compile(r"ignore\s+(previous|all|above)(\s+\w+)*\s+instructions", re.IGNORECASE),
    re.compile(r"ignore\s+[^\n\r\u2028\u2029]*\s*instructions", re.IGNORECASE),
    re.compile(r"system\s*:\s*", re.IGNORECASE),
    re.compile(r"\[\[[^\n\r\u2028\u2029]*\]\]"),
    re.compile(r"<script", re.IGNORECASE),
    re.compile(r"javascript:", re.IGNORECASE),
]

# Control characters except tab and newline (\x09, \x0A) and \r (normalized separately)
PROMPT_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
PATH_CONTROL_CHARS = re.compile(r"[\x00-\x1f]")

WINDOWS_DRIVE_ROOT = re.compile(r"^[A-Z]:\\", re.IGNORECASE)
WINDOWS_SYSTEM_PATHS = re.compile(r"^[A-Z]:\\(Windows|Program Files|System)", re.IGNORECASE)

TEMP_DIRS = ["/tmp", "/var/tmp"]
SYSTEM_DIRS = ["/etc", "/var/log", "/usr", "/bin", "/sbin", "/root", "/boot"]

SENSITIVE_KEYS = ["apiKey", "api_key", "key", "token", "secret", "password"]

KEY_ASSIGNMENT = re.compile(r"key[=:][\"']?[A-Za-z0-9_-]{20,}[\"']?", re.IGNORECASE)
GOOGLE_API_KEY = re.compile(r"AIza[A-Za-z0-9_-]{35}")

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


def validate_prompt(prompt):
    """Validate and sanitize a prompt for image generation."""
    if not prompt or not isinstance(prompt, str):
        return {"valid": False, "error": "Prompt is required"}

    trimmed = prompt.strip()

    if len(trimmed) < MIN_PROMPT_LENGTH:
        return {"valid": False, "error": f"Prompt must be at least {MIN_PROMPT_LENGTH} characters"}

    if len(trimmed) > MAX_PROMPT_LENGTH:
        return {"valid": False, "error": f"Prompt must be less than {MAX_PROMPT_LENGTH} characters"}

    for pattern in SUSPICIOUS_PATTERNS:
        if pattern.search(trimmed):
            return {"valid": False, "error": "Prompt contains disallowed patterns"}

    sanitized = PROMPT_CONTROL_CHARS.sub("", trimmed)
    sanitized = sanitized.replace("\r\n", "\n").replace("\r", "\n")

    return {"valid": True, "sanitized": sanitized}


def _allowed_roots():
    """Home, working directory and temp directories, in that order."""
    home_dir = os.environ.get("HOME") or os.environ.get("USERPROFILE") or ""
    temp_dirs = [d for d in TEMP_DIRS + [os.environ.get("TMPDIR", "")] if d]
    return home_dir, os.getcwd(), temp_dirs


def validate_output_path(path):
    """
    Validate a file path for safety.

    Relative paths are accepted as-is and resolved later against the working
    directory. Absolute paths must sit under the home directory, the working
    directory or a temp directory, and never under a system directory.

    All prefix checks are plain string prefixes, so "/tmpfoo" counts as being
    under "/tmp".
    """
    if not path or not isinstance(path, str):
        return {"valid": True}

    trimmed = path.strip()

    if ".." in trimmed:
        return {"valid": False, "error": "Path traversal not allowed"}

    if PATH_CONTROL_CHARS.search(trimmed):
        return {"valid": False, "error": "Path contains invalid characters"}

    if not trimmed.startswith("/") and not WINDOWS_DRIVE_ROOT.match(trimmed):
        return {"valid": True, "sanitized": trimmed}

    home_dir, cwd, temp_dirs = _allowed_roots()
    is_under_home = bool(home_dir) and trimmed.startswith(home_dir)
    is_under_cwd = trimmed.startswith(cwd)
    is_under_temp = any(trimmed.startswith(tmp) for tmp in temp_dirs)

    if not (is_under_home or is_under_cwd or is_under_temp):
        return {
            "valid": False,
            "error": "Absolute paths must be under your home directory, current working directory, or temp directory",
        }

    # Home or cwd can itself live under one of these (e.g. HOME=/root)
    for system_dir in SYSTEM_DIRS:
        if trimmed.startswith(system_dir):
            return {"valid": False, "error": "Cannot write to system directories"}

    if WINDOWS_SYSTEM_PATHS.match(trimmed):
        return {"valid": False, "error": "Cannot write to system directories"}

    return {"valid": True, "sanitized": trimmed}


def redact_text(text):
    """Strip API keys from an arbitrary string."""
    text = KEY_ASSIGNMENT.sub("key=[REDACTED]", text)
    return GOOGLE_API_KEY.sub("[REDACTED_KEY]", text)


def safe_error_message(error):
    """Create a safe error message that doesn't leak sensitive info."""
    if isinstance(error, Exception):
        return redact_text(str(error))
    return UNKNOWN_ERROR_MESSAGE


def redact_sensitive(obj):
    """Return a shallow copy of obj with sensitive-looking keys redacted for logging."""
    result = dict(obj)
    for key in result:
        if any(sk.lower() in str(key).lower() for sk in SENSITIVE_KEYS):
            result[key] = "[REDACTED]"
    return result
