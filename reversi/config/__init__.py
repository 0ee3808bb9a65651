# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package for the Reversi engine.

Example:
    >>> from reversi.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.environment)
    'development'
"""

from reversi.config.settings import (
    SearchSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "Settings",
    "SearchSettings",
    "get_settings",
    "clear_settings_cache",
]
