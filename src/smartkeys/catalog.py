# smartkeys/catalog.py
from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from . import config as CFG
from .languages import SUPPORTED_LANGUAGES
from .models import KeyboardTab, LanguageDefinition, SnippetItem


class LanguageCatalog:
    """
    Read-only registry of language definitions.

    Lookups never fail: an unknown key or extension resolves to the default
    language (`default` when registered, otherwise the first one). Safe for
    unsynchronized concurrent reads once built.
    """

    def __init__(
        self,
        languages: Iterable[LanguageDefinition] = SUPPORTED_LANGUAGES,
        *,
        default: str = CFG.DEFAULT_LANGUAGE,
    ) -> None:
        self._languages: Tuple[LanguageDefinition, ...] = tuple(languages)
        if not self._languages:
            raise ValueError("LanguageCatalog: at least one language is required")
        self._by_key: Dict[str, LanguageDefinition] = {}
        self._by_ext: Dict[str, LanguageDefinition] = {}
        for lang in self._languages:
            if lang.key in self._by_key:
                raise ValueError(f"duplicate language key: {lang.key!r}")
            self._by_key[lang.key] = lang
            for ext in lang.file_extensions:
                # first registration wins for a shared suffix
                self._by_ext.setdefault(ext.lower(), lang)
        self._default = self._by_key.get(default, self._languages[0])

    @property
    def default(self) -> LanguageDefinition:
        return self._default

    def __iter__(self):
        return iter(self._languages)

    def __len__(self) -> int:
        return len(self._languages)

    def keys(self) -> List[str]:
        return [lang.key for lang in self._languages]

    def by_key(self, key: Optional[str]) -> LanguageDefinition:
        if not key:
            return self.default
        return self._by_key.get(key, self.default)

    def by_extension(self, extension: Optional[str]) -> LanguageDefinition:
        """'py', '.PY' and 'src/main.py' all resolve to Python."""
        if not extension:
            return self.default
        ext = extension.strip().lower()
        if "/" in ext or "\\" in ext or ext.count(".") > 1 or (not ext.startswith(".") and "." in ext):
            ext = ext.rsplit(".", 1)[-1]
        return self._by_ext.get(ext.lstrip("."), self.default)

    def tabs(self, language: LanguageDefinition) -> Tuple[KeyboardTab, ...]:
        return tuple(tab for tab in language.snippets if tab.data)


def build_candidate_pool(tabs: Sequence[KeyboardTab]) -> List[SnippetItem]:
    """
    Flatten tabs into one pool, keeping the first button for each label.

    Declaration order is preserved; ranking relies on it for stable ties.
    """
    seen: set[str] = set()
    pool: List[SnippetItem] = []
    for tab in tabs:
        for button in tab.data:
            if button.label in seen:
                continue
            seen.add(button.label)
            pool.append(button)
    return pool
