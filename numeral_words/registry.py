"""
Language registry: resolves a locale tag to a built LanguageProfile.

Resolution order for a tag such as ``zh_hant_tw``:
  1. normalize            → "zh-Hant-TW"
  2. exact code           → (none)
  3. alias table          → (none)
  4. drop trailing subtag → "zh-Hant"  ✓

Profiles are built on first use (vocabulary checks and lookup tables run
then) and shared read-only afterwards.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping

from .exceptions import UnknownLanguage
from .languages import ALIASES, BUILDERS
from .profile import LanguageProfile

logger = logging.getLogger(__name__)


def normalize_tag(tag: str) -> str:
    """Canonical casing for a BCP 47-style tag: ``ZH_hant_tw`` → ``zh-Hant-TW``."""
    subtags = [part for part in tag.strip().replace("_", "-").split("-") if part]
    if not subtags:
        return ""
    normalized = [subtags[0].lower()]
    for part in subtags[1:]:
        if len(part) == 4 and part.isalpha():
            normalized.append(part.title())
        elif len(part) == 2 or part.isdigit():
            normalized.append(part.upper())
        else:
            normalized.append(part.lower())
    return "-".join(normalized)


class LanguageRegistry:
    """Maps locale tags to language profiles.

    Usage:
        registry = LanguageRegistry()
        profile = registry.resolve("fr-CA")   # falls back to "fr"
    """

    def __init__(
        self,
        builders: Mapping[str, Callable[[], LanguageProfile]] | None = None,
        aliases: Mapping[str, str] | None = None,
    ):
        self._builders = dict(BUILDERS if builders is None else builders)
        self._aliases = dict(ALIASES if aliases is None else aliases)
        self._profiles: dict[str, LanguageProfile] = {}
        self._lock = threading.Lock()

    def register(self, code: str, builder: Callable[[], LanguageProfile]) -> None:
        """Add or replace a language; a cached profile for ``code`` is dropped."""
        with self._lock:
            self._builders[code] = builder
            self._profiles.pop(code, None)

    @property
    def codes(self) -> list[str]:
        return sorted(self._builders)

    @property
    def loaded(self) -> int:
        return len(self._profiles)

    def canonical_code(self, tag: str) -> str:
        """Return the registered code ``tag`` resolves to.

        Raises:
            UnknownLanguage: If neither the tag nor any of its prefixes is known.
        """
        normalized = normalize_tag(tag) if isinstance(tag, str) else ""
        candidate = normalized
        while candidate:
            if candidate in self._builders:
                if candidate != normalized:
                    logger.info("Language %r resolved to %r", tag, candidate)
                return candidate
            alias = self._aliases.get(candidate)
            if alias in self._builders:
                logger.info("Language %r resolved to %r via alias", tag, alias)
                return alias
            candidate = candidate.rpartition("-")[0]

        raise UnknownLanguage(
            f"No language profile for {tag!r}",
            {"language": tag, "supported": self.codes},
        )

    def resolve(self, tag: str) -> LanguageProfile:
        code = self.canonical_code(tag)
        profile = self._profiles.get(code)
        if profile is not None:
            return profile

        with self._lock:
            # another thread may have finished the build while we waited
            profile = self._profiles.get(code)
            if profile is None:
                logger.info("Building language profile %r", code)
                profile = self._builders[code]()
                self._profiles[code] = profile
        return profile

    def warm(self) -> None:
        """Build every registered profile now instead of on first use."""
        for code in self.codes:
            self.resolve(code)
