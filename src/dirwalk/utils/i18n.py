from __future__ import annotations

"""
Internationalization (i18n) Utility.

Resolves user-facing CLI strings (help texts, error and status messages)
from JSON locale files using dot-notation keys with str.format
interpolation. Unknown keys resolve to themselves so a missing translation
never breaks the command line.
"""

import json
import logging
import os
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "interface", "locales")


class I18n:
    """
    Translation table for one locale.

    Attributes:
        is_loaded: True if the locale file was read successfully.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, locales_dir: str = LOCALES_DIR):
        self._locale = locale
        self._locales_dir = os.path.abspath(locales_dir)
        self._translations: Dict[str, Any] = {}
        self.is_loaded = False
        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def available_locales(self) -> List[str]:
        """List the locale identifiers shipped in the locales directory."""
        if not os.path.isdir(self._locales_dir):
            return []
        return sorted(
            os.path.splitext(name)[0]
            for name in os.listdir(self._locales_dir)
            if name.endswith(".json")
        )

    def load_locale(self, locale: str) -> None:
        """
        Replace the active table with the one stored in '<locale>.json'.

        A missing or corrupt file leaves an empty table and logs the cause.
        """
        file_path = os.path.join(self._locales_dir, f"{locale}.json")

        if not os.path.exists(file_path):
            logger.warning(f"I18n: Locale resource missing at '{file_path}'.")
            self._translations = {}
            self.is_loaded = False
            return

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                self._translations = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Cannot read locale file {file_path}: {e}")
            self._translations = {}
            self.is_loaded = False
            return

        self._locale = locale
        self.is_loaded = True

    def t(self, key: str, **kwargs: Any) -> str:
        """
        Resolve a dotted key such as 'cli.args.sort'.

        Args:
            key: Hierarchical identifier.
            **kwargs: Values interpolated with str.format.

        Returns:
            str: The formatted string, or the key itself if it cannot be
                 resolved.
        """
        current: Any = self._translations
        for part in key.split("."):
            if not isinstance(current, dict):
                return key
            current = current.get(part)

        if not isinstance(current, str):
            return key
        if not kwargs:
            return current

        try:
            return current.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Formatting error for '{key}': {e}")
            return current


# Shared instance used by the CLI
i18n = I18n(DEFAULT_LOCALE)
