# Copyright (c) 2025 PeeperFrog Press
# Licensed under the Apache License, Version 2.0. See LICENSE file for details.
"""
Common interface for image generation providers.

A provider takes a request dict:
    {"prompt", "aspect_ratio", "width", "height", "quality"}
and returns:
    {"base64_data", "mime_type"}
or raises ProviderError.
"""

QUALITY_LEVELS = ["standard", "high"]


def is_retryable_status(status_code):
    """Rate limits and server-side failures (any 5xx) may succeed on a later attempt."""
    return status_code == 429 or (status_code is not None and 500 <= status_code < 600)


class ProviderError(Exception):
    """Image generation failed. `retryable` says whether trying again could help."""

    def __init__(self, message, provider, status_code=None, retryable=None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code
        if retryable is None:
            retryable = is_retryable_status(status_code)
        self.retryable = retryable


class ImageProvider:
    name = None

    def __init__(self, config=None):
        self.config = config or {}

    def is_configured(self):
        raise NotImplementedError

    def get_supported_aspect_ratios(self):
        raise NotImplementedError

    def get_max_resolution(self):
        raise NotImplementedError

    def generate_image(self, request):
        raise NotImplementedError
