# Copyright (c) 2025 PeeperFrog Press
# Licensed under the Apache License, Version 2.0. See LICENSE file for details.
"""
Platform presets: standard image dimensions for blogs, social media and video.

Each preset maps to the platform's aspect ratio and recommended size, plus the
closest ratio Gemini can actually generate. Ratios Gemini doesn't support
natively (3:1, 1.91:1, 4:1, 2.7:1) are generated as 16:9 and need a crop.
"""

from types import MappingProxyType

GEMINI_ASPECT_RATIOS = ["1:1", "16:9", "9:16", "4:3", "3:4"]

CATEGORIES = ["blog", "social", "video", "generic"]


def _preset(name, aspect_ratio, gemini_aspect_ratio, width, height, category, description):
    return MappingProxyType({
        "name": name,
        "aspect_ratio": aspect_ratio,
        "gemini_aspect_ratio": gemini_aspect_ratio,
        "native_aspect_ratio": aspect_ratio == gemini_aspect_ratio,
        "width": width,
        "height": height,
        "category": category,
        "description": description,
    })


PLATFORM_PRESETS = MappingProxyType({
    # Blog platforms - all 16:9 native
    "ghost-banner":        _preset("Ghost Blog Banner", "16:9", "16:9", 1200, 675, "blog", "Featured image for Ghost blog posts"),
    "ghost-feature":       _preset("Ghost Feature Image (HD)", "16:9", "16:9", 2000, 1125, "blog", "High-resolution feature image for Ghost"),
    "medium-ghost-spooky": _preset("Medium Ghost Spooky", "16:9", "16:9", 2560, 1440, "blog", "Premium high-resolution blog banner (QHD 1440p)"),
    "medium-banner":       _preset("Medium Banner", "16:9", "16:9", 1400, 788, "blog", "Banner image for Medium articles"),
    "substack-header":     _preset("Substack Header", "16:9", "16:9", 1456, 816, "blog", "Header image for Substack posts"),
    "wordpress-featured":  _preset("WordPress Featured", "16:9", "16:9", 1200, 675, "blog", "Featured image for WordPress posts"),

    # Instagram
    "instagram-post":      _preset("Instagram Post", "1:1", "1:1", 1080, 1080, "social", "Square post for Instagram feed"),
    "instagram-story":     _preset("Instagram Story", "9:16", "9:16", 1080, 1920, "social", "Vertical story/reel for Instagram"),
    "instagram-landscape": _preset("Instagram Landscape", "16:9", "16:9", 1080, 608, "social", "Landscape post for Instagram"),

    # Twitter/X
    "twitter-post":        _preset("Twitter/X Post", "16:9", "16:9", 1200, 675, "social", "Image for Twitter/X posts"),
    "twitter-header":      _preset("Twitter/X Header", "3:1", "16:9", 1500, 500, "social", "Profile header for Twitter/X (note: generated as 16:9, crop needed)"),

    # LinkedIn
    "linkedin-post":       _preset("LinkedIn Post", "1.91:1", "16:9", 1200, 628, "social", "Image for LinkedIn posts (note: generated as 16:9, very close match)"),
    "linkedin-banner":     _preset("LinkedIn Banner", "4:1", "16:9", 1584, 396, "social", "Profile banner for LinkedIn (note: generated as 16:9, crop needed)"),

    # Facebook
    "facebook-post":       _preset("Facebook Post", "1.91:1", "16:9", 1200, 630, "social", "Image for Facebook posts (note: generated as 16:9, very close match)"),
    "facebook-cover":      _preset("Facebook Cover", "2.7:1", "16:9", 820, 312, "social", "Cover photo for Facebook (note: generated as 16:9, crop needed)"),

    # Video
    "youtube-thumbnail":   _preset("YouTube Thumbnail", "16:9", "16:9", 1280, 720, "video", "Thumbnail for YouTube videos"),
    "youtube-banner":      _preset("YouTube Banner", "16:9", "16:9", 2560, 1440, "video", "Channel banner for YouTube"),

    # Generic sizes
    "square":              _preset("Square", "1:1", "1:1", 1024, 1024, "generic", "Generic square image"),
    "square-hd":           _preset("Square HD", "1:1", "1:1", 2048, 2048, "generic", "High-resolution square image"),
    "landscape":           _preset("Landscape", "16:9", "16:9", 1920, 1080, "generic", "Standard landscape (1080p)"),
    "landscape-4k":        _preset("Landscape 4K", "16:9", "16:9", 3840, 2160, "generic", "4K landscape image"),
    "portrait":            _preset("Portrait", "9:16", "9:16", 1080, 1920, "generic", "Standard portrait/vertical image"),
})

PRESET_KEYS = list(PLATFORM_PRESETS.keys())


def get_preset(key):
    """Look up a preset by key, raise ValueError naming the available presets if unknown."""
    if key not in PLATFORM_PRESETS:
        raise ValueError(f"Unknown preset: {key}. Available: {', '.join(PRESET_KEYS)}")
    return PLATFORM_PRESETS[key]


def get_presets_by_category(category):
    return {key: preset for key, preset in PLATFORM_PRESETS.items() if preset["category"] == category}


def to_gemini_aspect_ratio(aspect_ratio):
    """Map any aspect ratio string to one Gemini supports. Anything unsupported becomes 16:9."""
    ratio = aspect_ratio.lower()
    if ratio in GEMINI_ASPECT_RATIOS:
        return ratio
    return "16:9"
