"""
Global configuration for the beacon light client primitives.

This module contains environment-specific settings that apply across all subspecs.
"""

import os

_SUPPORTED_BEACON_PRESETS: list[str] = ["mainnet", "minimal"]

BEACON_PRESET = os.environ.get("BEACON_PRESET", "mainnet").lower()
"""The preset flag ('mainnet' or 'minimal'). Defaults to 'mainnet'."""

if BEACON_PRESET not in _SUPPORTED_BEACON_PRESETS:
    raise ValueError(
        f"Invalid BEACON_PRESET environment variable: '{BEACON_PRESET}'. "
        f"Supported values: {_SUPPORTED_BEACON_PRESETS}"
    )
