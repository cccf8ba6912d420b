#!/usr/bin/env python3
# Copyright (c) 2025 PeeperFrog Press
# Licensed under the Apache License, Version 2.0. See LICENSE file for details.
#
# Not affiliated with Google, Gemini, Ghost, Medium, Substack, WordPress,
# Instagram, X, LinkedIn, Facebook, or YouTube.
# All trademarks are property of their respective owners.
# THIS SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND.
"""
PeeperFrog Platform Images MCP Server - Version 1.0 Beta

Generates images sized for a target platform (blog banners, social posts,
video thumbnails) and saves them to disk. Prompts and output paths are
validated before anything is sent to the provider, and errors are redacted
before they reach the client.

Part of PeeperFrog Create: https://github.com/PeeperFrog/peeperfrog-create
"""

import os
import sys
import json
import asyncio
import traceback
from pathlib import Path

# MCP SDK imports
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from debug_logging import configure_debug_log, debug_log
from image_providers import (
    DEFAULT_PROVIDER,
    create_provider,
    get_available_providers,
    get_configured_providers,
)
from image_utils import estimate_file_size, format_file_size, save_image
from platform_presets import CATEGORIES, PLATFORM_PRESETS, PRESET_KEYS, get_preset, get_presets_by_category
from provider_base import QUALITY_LEVELS
from security_utils import redact_sensitive, safe_error_message, validate_output_path, validate_prompt

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

CONFIG_DIR = Path(__file__).parent.parent
CONFIG_FILE = CONFIG_DIR / "config.json"
ENV_FILE = CONFIG_DIR / ".env"
DEBUG_LOG_FILE = CONFIG_DIR / "debug.log"

DEFAULT_CONFIG = {
    "images_dir": "./images",
    "default_preset": "ghost-banner",
    "default_quality": "standard",
    "provider": DEFAULT_PROVIDER,
    "request_timeout": 120,
    "debug": False,
}


def load_env():
    """Load .env file if present. Variables passed by the MCP client take precedence."""
    if ENV_FILE.exists():
        with open(ENV_FILE, "r") as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    os.environ.setdefault(key.strip(), value.strip())


def load_config(config_file=CONFIG_FILE):
    """Load config.json over the defaults. A missing file means defaults only."""
    cfg = dict(DEFAULT_CONFIG)
    config_file = Path(config_file)
    if config_file.exists():
        with open(config_file, "r") as f:
            cfg.update(json.load(f))
    # Expand ~ and resolve relative paths against the config directory
    images_dir = os.path.expanduser(cfg["images_dir"])
    if not os.path.isabs(images_dir):
        images_dir = os.path.join(str(config_file.parent), images_dir)
    cfg["images_dir"] = os.path.normpath(images_dir)
    return cfg


# Load environment and config on import
load_env()
CFG = load_config()
configure_debug_log(CFG.get("debug", False), str(DEBUG_LOG_FILE))

# ---------------------------------------------------------------------------
# Tool implementations
# ---------------------------------------------------------------------------

def generate_image(prompt, preset=None, output_path=None, quality=None, provider=None):
    """Validate inputs, generate an image for a platform preset, and save it."""
    prompt_check = validate_prompt(prompt)
    if not prompt_check["valid"]:
        return {"success": False, "error": prompt_check["error"]}

    path_check = validate_output_path(output_path)
    if not path_check["valid"]:
        return {"success": False, "error": path_check["error"]}

    preset_key = preset or CFG["default_preset"]
    platform = get_preset(preset_key)

    quality = quality or CFG["default_quality"]
    if quality not in QUALITY_LEVELS:
        return {"success": False, "error": f"Unknown quality: {quality}. Options: {', '.join(QUALITY_LEVELS)}"}

    image_provider = create_provider(provider or CFG["provider"], {"request_timeout": CFG["request_timeout"]})
    result = image_provider.generate_image({
        "prompt": prompt_check["sanitized"],
        "aspect_ratio": platform["gemini_aspect_ratio"],
        "width": platform["width"],
        "height": platform["height"],
        "quality": quality,
    })

    # Directory target: save_image generates the filename
    target = path_check.get("sanitized") or os.path.join(CFG["images_dir"], "")
    saved_path = save_image(result["base64_data"], target, result["mime_type"])
    debug_log(f"Saved {preset_key} image to {saved_path}")

    response = {
        "success": True,
        "path": saved_path,
        "preset": preset_key,
        "preset_name": platform["name"],
        "aspect_ratio": platform["aspect_ratio"],
        "gemini_aspect_ratio": platform["gemini_aspect_ratio"],
        "width": platform["width"],
        "height": platform["height"],
        "mime_type": result["mime_type"],
        "file_size": format_file_size(estimate_file_size(result["base64_data"])),
        "provider": image_provider.name,
        "quality": quality,
    }
    if not platform["native_aspect_ratio"]:
        response["note"] = (
            f"{platform['aspect_ratio']} is not supported natively; generated as "
            f"{platform['gemini_aspect_ratio']}. Crop to {platform['width']}x{platform['height']}."
        )
    return response


def list_presets(category=None):
    if category:
        if category not in CATEGORIES:
            return {"success": False, "error": f"Unknown category: {category}. Options: {', '.join(CATEGORIES)}"}
        presets = get_presets_by_category(category)
    else:
        presets = PLATFORM_PRESETS
    return {
        "success": True,
        "presets": {key: dict(preset) for key, preset in presets.items()},
        "count": len(presets),
    }


def list_providers():
    return {
        "success": True,
        "available": get_available_providers(),
        "configured": get_configured_providers({"request_timeout": CFG["request_timeout"]}),
        "default": CFG["provider"],
    }

# ---------------------------------------------------------------------------
# MCP Server Setup
# ---------------------------------------------------------------------------

server = Server("peeperfrog-platform-images")


@server.list_tools()
async def handle_list_tools():
    """List available image tools."""
    return [
        Tool(
            name="generate_image",
            description="Generate an image sized for a platform preset (blog banner, social post, thumbnail) and save it to disk. Returns the saved file path.",
            inputSchema={
                "type": "object",
                "properties": {
                    "prompt": {
                        "type": "string",
                        "description": "Description of the image to generate (3-4000 characters)",
                        "minLength": 3,
                        "maxLength": 4000
                    },
                    "preset": {
                        "type": "string",
                        "description": "Platform preset that sets aspect ratio and dimensions",
                        "enum": PRESET_KEYS,
                        "default": CFG["default_preset"]
                    },
                    "output_path": {
                        "type": "string",
                        "description": "File or directory to save to. Relative paths resolve against the working directory; absolute paths must be under home, cwd, or temp. Defaults to the configured images directory."
                    },
                    "quality": {
                        "type": "string",
                        "description": "standard (fast, cheaper) or high (pro model, sized output)",
                        "enum": QUALITY_LEVELS,
                        "default": CFG["default_quality"]
                    },
                    "provider": {
                        "type": "string",
                        "description": "Image provider to use",
                        "enum": get_available_providers(),
                        "default": CFG["provider"]
                    }
                },
                "required": ["prompt"]
            }
        ),
        Tool(
            name="list_presets",
            description="List platform presets with their aspect ratios and dimensions, optionally filtered by category.",
            inputSchema={
                "type": "object",
                "properties": {
                    "category": {
                        "type": "string",
                        "description": "Only return presets in this category",
                        "enum": CATEGORIES
                    }
                },
                "required": []
            }
        ),
        Tool(
            name="list_providers",
            description="List image providers and which of them have API keys configured.",
            inputSchema={"type": "object", "properties": {}, "required": []}
        ),
    ]


@server.call_tool()
async def handle_call_tool(name: str, arguments: dict):
    """Handle tool calls."""
    arguments = arguments or {}
    debug_log(f"Tool call: {name} with args: {json.dumps(redact_sensitive(arguments), default=str)}")
    try:
        if name == "generate_image":
            result = generate_image(
                arguments.get("prompt"),
                arguments.get("preset"),
                arguments.get("output_path"),
                arguments.get("quality"),
                arguments.get("provider")
            )
        elif name == "list_presets":
            result = list_presets(arguments.get("category"))
        elif name == "list_providers":
            result = list_providers()
        else:
            result = {"success": False, "error": f"Unknown tool: {name}"}

        if result.get("success"):
            debug_log(f"Tool {name} completed successfully")
        else:
            debug_log(f"Tool {name} rejected: {result.get('error')}", "WARNING")
        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        debug_log(f"Tool {name} failed: {e}\n{traceback.format_exc()}", "ERROR")
        error = {"success": False, "error": safe_error_message(e)}
        if getattr(e, "retryable", None) is not None:
            error["retryable"] = e.retryable
        return [TextContent(type="text", text=json.dumps(error, indent=2))]

# ---------------------------------------------------------------------------
# Main Entry Point
# ---------------------------------------------------------------------------

async def serve():
    """Run the MCP server over stdio."""
    debug_log("Starting PeeperFrog Platform Images MCP Server...")
    debug_log(f"Config file: {CONFIG_FILE}")
    debug_log(f"Images dir: {CFG['images_dir']}")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main():
    asyncio.run(serve())


if __name__ == "__main__":
    sys.exit(main())
