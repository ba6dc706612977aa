"""Message catalogue for user-facing search strings."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any


class I18nService:
    """Look up ``locales/<lang>.json`` strings.

    ``en-GB`` falls back to ``en``, then to the default locale, then to the key
    itself.
    """

    def __init__(self, *, locales_path: str | Path | None = None, default_locale: str = "en") -> None:
        self.locales_path = Path(locales_path or Path(__file__).with_name("locales"))
        self.default_locale = default_locale.lower()

    def gettext(self, key: str, *, locale: str | None = None, **kwargs: Any) -> str:
        text = None
        for candidate in self._candidates(locale):
            text = self._load_locale(candidate).get(key)
            if text is not None:
                break
        if text is None:
            text = key
        return text.format(**kwargs) if kwargs else text

    def ngettext(self, key: str, count: int, *, locale: str | None = None, **kwargs: Any) -> str:
        """Pick ``<key>.one`` or ``<key>.other``; ``count`` is available to the template."""

        suffix = "one" if count == 1 else "other"
        return self.gettext(f"{key}.{suffix}", locale=locale, count=count, **kwargs)

    def _candidates(self, locale: str | None) -> list[str]:
        loc = (locale or self.default_locale).lower().replace("_", "-")
        candidates = [loc]
        language = loc.split("-", 1)[0]
        if language != loc:
            candidates.append(language)
        if self.default_locale not in candidates:
            candidates.append(self.default_locale)
        return candidates

    @lru_cache(maxsize=16)
    def _load_locale(self, locale: str) -> dict[str, str]:
        file_path = self.locales_path / f"{locale}.json"
        if not file_path.exists():
            return {}
        with file_path.open("r", encoding="utf-8") as fp:
            return json.load(fp)


__all__ = ["I18nService"]
