# Copyright (c) 2025 PeeperFrog Press
# Licensed under the Apache License, Version 2.0. See LICENSE file for details.
#
# Not affiliated with Google or Gemini.
# All trademarks are property of their respective owners.
"""
Google Gemini image generation provider.

standard quality uses Gemini 2.5 Flash Image, high quality uses Gemini 3 Pro
Image with an output size hint derived from the requested dimensions.
"""

import os
import json
import requests

from debug_logging import debug_log
from platform_presets import GEMINI_ASPECT_RATIOS
from provider_base import ImageProvider, ProviderError

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"

MODELS = {
    "standard": "gemini-2.5-flash-image",
    "high": "gemini-3-pro-image-preview",
}

API_KEY_ENV_VARS = ("GOOGLE_API_KEY", "GEMINI_API_KEY")

DEFAULT_TIMEOUT = 120

MAX_RESOLUTION = {"width": 4096, "height": 4096}


def _image_size_hint(width, height):
    """Pro model output size tier for the larger requested side."""
    largest = max(width or 0, height or 0)
    if largest <= 1024:
        return "1K"
    if largest <= 2048:
        return "2K"
    return "4K"


class GeminiProvider(ImageProvider):
    name = "gemini"

    def __init__(self, config=None):
        super().__init__(config)
        self.api_key = self.config.get("api_key") or next(
            (os.environ[var] for var in API_KEY_ENV_VARS if os.environ.get(var)), None
        )
        self.timeout = self.config.get("request_timeout", DEFAULT_TIMEOUT)

    def is_configured(self):
        return bool(self.api_key)

    def get_supported_aspect_ratios(self):
        return list(GEMINI_ASPECT_RATIOS)

    def get_max_resolution(self):
        return dict(MAX_RESOLUTION)

    def build_payload(self, request):
        quality = request.get("quality", "standard")
        image_config = {"aspectRatio": request["aspect_ratio"]}
        if quality == "high":
            image_config["imageSize"] = _image_size_hint(request.get("width"), request.get("height"))

        return {
            "contents": [{"parts": [{"text": request["prompt"]}]}],
            "generationConfig": {
                "responseModalities": ["TEXT", "IMAGE"],
                "imageConfig": image_config,
            },
        }

    def generate_image(self, request):
        if not self.is_configured():
            raise ProviderError(
                f"Gemini API key not set. Set one of: {', '.join(API_KEY_ENV_VARS)}",
                self.name, retryable=False,
            )

        quality = request.get("quality", "standard")
        if quality not in MODELS:
            quality = "standard"
        model = MODELS[quality]
        payload = self.build_payload(request)

        debug_log(f"Gemini generation starting: model={model}, aspect_ratio={request['aspect_ratio']}")
        debug_log(f"Gemini request config: {json.dumps(payload['generationConfig'])}")

        url = f"{GEMINI_API_BASE}/{model}:generateContent"
        headers = {"Content-Type": "application/json", "x-goog-api-key": self.api_key}
        try:
            response = requests.post(url, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise ProviderError(f"Gemini request failed: {e}", self.name, retryable=True) from e

        debug_log(f"Gemini response status: {response.status_code}")
        if response.status_code != 200:
            debug_log(f"Gemini API error response: {response.text[:500]}", "ERROR")
            raise ProviderError(
                f"Gemini API error: {response.status_code} - {response.text[:500]}",
                self.name, status_code=response.status_code,
            )

        try:
            parts = response.json()["candidates"][0]["content"]["parts"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ProviderError("Unexpected Gemini API response format", self.name, retryable=False) from e

        for part in parts:
            inline = part.get("inlineData")
            if inline and inline.get("data"):
                return {
                    "base64_data": inline["data"],
                    "mime_type": inline.get("mimeType", "image/png"),
                }

        raise ProviderError("No image data in Gemini API response", self.name, retryable=False)
