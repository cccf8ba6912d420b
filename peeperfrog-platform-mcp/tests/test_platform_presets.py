#!/usr/bin/env python3
"""
Tests for platform presets.
"""
import unittest
import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from platform_presets import (
    CATEGORIES,
    GEMINI_ASPECT_RATIOS,
    PLATFORM_PRESETS,
    PRESET_KEYS,
    get_preset,
    get_presets_by_category,
    to_gemini_aspect_ratio,
)


class TestPlatformPresets(unittest.TestCase):

    def test_required_properties(self):
        for key, preset in PLATFORM_PRESETS.items():
            with self.subTest(preset=key):
                self.assertTrue(preset["name"])
                self.assertTrue(preset["aspect_ratio"])
                self.assertIn(preset["gemini_aspect_ratio"], GEMINI_ASPECT_RATIOS)
                self.assertGreater(preset["width"], 0)
                self.assertGreater(preset["height"], 0)
                self.assertIn(preset["category"], CATEGORIES)
                self.assertTrue(preset["description"])

    def test_gemini_ratio_matches_mapping(self):
        for key, preset in PLATFORM_PRESETS.items():
            with self.subTest(preset=key):
                self.assertEqual(preset["gemini_aspect_ratio"], to_gemini_aspect_ratio(preset["aspect_ratio"]))

    def test_medium_ghost_spooky(self):
        preset = PLATFORM_PRESETS["medium-ghost-spooky"]
        self.assertEqual(preset["width"], 2560)
        self.assertEqual(preset["height"], 1440)
        self.assertEqual(preset["aspect_ratio"], "16:9")
        self.assertEqual(preset["category"], "blog")

    def test_ghost_banner(self):
        preset = PLATFORM_PRESETS["ghost-banner"]
        self.assertEqual((preset["width"], preset["height"]), (1200, 675))

    def test_social_presets_present(self):
        for key in ("instagram-post", "twitter-post", "linkedin-post", "facebook-post"):
            self.assertIn(key, PLATFORM_PRESETS)

    def test_non_native_ratios_flagged(self):
        self.assertFalse(PLATFORM_PRESETS["linkedin-banner"]["native_aspect_ratio"])
        self.assertFalse(PLATFORM_PRESETS["twitter-header"]["native_aspect_ratio"])
        self.assertTrue(PLATFORM_PRESETS["instagram-story"]["native_aspect_ratio"])

    def test_presets_are_read_only(self):
        with self.assertRaises(TypeError):
            PLATFORM_PRESETS["new"] = {}
        with self.assertRaises(TypeError):
            PLATFORM_PRESETS["square"]["width"] = 1


class TestPresetKeys(unittest.TestCase):

    def test_contains_keys(self):
        for key in ("ghost-banner", "medium-ghost-spooky", "instagram-post", "youtube-thumbnail"):
            self.assertIn(key, PRESET_KEYS)

    def test_matches_number_of_presets(self):
        self.assertEqual(len(PRESET_KEYS), len(PLATFORM_PRESETS))
        self.assertEqual(len(PRESET_KEYS), 22)


class TestGetPreset(unittest.TestCase):

    def test_known_preset(self):
        self.assertEqual(get_preset("square")["width"], 1024)

    def test_unknown_preset_lists_available(self):
        with self.assertRaises(ValueError) as ctx:
            get_preset("myspace-banner")
        self.assertIn("Unknown preset: myspace-banner", str(ctx.exception))
        self.assertIn("ghost-banner", str(ctx.exception))


class TestGetPresetsByCategory(unittest.TestCase):

    def test_each_category(self):
        for category in ("blog", "social", "video", "generic"):
            with self.subTest(category=category):
                presets = get_presets_by_category(category)
                self.assertGreater(len(presets), 0)
                for preset in presets.values():
                    self.assertEqual(preset["category"], category)

    def test_video(self):
        self.assertIn("youtube-thumbnail", get_presets_by_category("video"))

    def test_unknown_category_empty(self):
        self.assertEqual(get_presets_by_category("print"), {})


class TestToGeminiAspectRatio(unittest.TestCase):

    def test_supported_ratios_pass_through(self):
        for ratio in ("1:1", "16:9", "9:16", "4:3", "3:4"):
            self.assertEqual(to_gemini_aspect_ratio(ratio), ratio)

    def test_wide_ratios_map_to_16_9(self):
        for ratio in ("1.91:1", "2.7:1", "3:1", "4:1"):
            self.assertEqual(to_gemini_aspect_ratio(ratio), "16:9")

    def test_unknown_defaults_to_16_9(self):
        self.assertEqual(to_gemini_aspect_ratio("5:3"), "16:9")
        self.assertEqual(to_gemini_aspect_ratio("unknown"), "16:9")


if __name__ == '__main__':
    unittest.main()
