# Copyright (c) 2025 PeeperFrog Press
# Licensed under the Apache License, Version 2.0. See LICENSE file for details.
"""
Helpers for naming and saving generated images.
"""

import os
import re
import base64
from datetime import datetime, timezone

MIME_TO_EXT = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/webp": ".webp",
    "image/gif": ".gif",
}

DEFAULT_FILENAME_PREFIX = "blog-image"


def get_extension_from_mime_type(mime_type):
    return MIME_TO_EXT.get(mime_type, ".png")


def generate_filename(prefix="image", mime_type="image/png"):
    """Generate a default filename like 'image-2025-01-31T14-05-09.png' (UTC, second precision)."""
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%S")
    return f"{prefix}-{timestamp}{get_extension_from_mime_type(mime_type)}"


def sanitize_filename(name):
    """Make a string safe for use as a filename: lowercase, dashes, max 100 chars."""
    name = re.sub(r"[^a-zA-Z0-9_-]", "-", name)
    name = re.sub(r"-+", "-", name)
    name = name.strip("-")
    return name.lower()[:100]


def save_image(base64_data, output_path, mime_type="image/png"):
    """
    Save base64 image data to a file and return the absolute path written.

    If output_path ends with a path separator or is an existing directory,
    a timestamped filename is generated inside it. A missing extension is
    filled in from mime_type. Parent directories are created as needed.

    The base64 payload is not validated here; callers check the provider
    response before saving.
    """
    absolute_path = os.path.abspath(output_path)

    is_directory = (
        output_path.endswith("/")
        or output_path.endswith("\\")
        or os.path.isdir(absolute_path)
    )
    if is_directory:
        absolute_path = os.path.join(absolute_path, generate_filename(DEFAULT_FILENAME_PREFIX, mime_type))

    os.makedirs(os.path.dirname(absolute_path), exist_ok=True)

    final_path = absolute_path
    if not os.path.splitext(final_path)[1]:
        final_path += get_extension_from_mime_type(mime_type)

    with open(final_path, "wb") as f:
        f.write(base64.b64decode(base64_data))

    return final_path


def estimate_file_size(base64_data):
    """Approximate decoded size in bytes (base64 is ~4/3 the binary size)."""
    return (len(base64_data) * 3) // 4


def format_file_size(num_bytes):
    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:.1f} KB"
    return f"{num_bytes / (1024 * 1024):.1f} MB"
