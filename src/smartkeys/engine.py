# smartkeys/engine.py
from __future__ import annotations

import os
import logging
from typing import List, Optional, Sequence

from . import config as CFG
from .catalog import LanguageCatalog, build_candidate_pool
from .context import extract_context
from .customization import CustomizationStore
from .expansion import expand
from .models import LanguageDefinition, Prediction, SnippetItem, Token, TypingContext
from .scoring import rank, record_selection
from .templates import TemplateHistoryStore
from .tokenizer import classify, classify_text
from .DB.api import KeyValueStore, make_store

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the read-only language catalog (LanguageCatalog),
      - key-value persistence via a KeyValueStore (SQLite or in-memory),
      - template fill history (TemplateHistoryStore),
      - keyboard customisations (CustomizationStore),
      - the pure scoring / expansion / tokenizer functions.

    Public API (used by CLI/Flask/desktop playground):
      * predict(text, cursor, language): context -> pool -> ranked predictions
      * get_predictions / expand_insertion_text / on_selection_confirmed:
        the keyboard callback surface
      * classify / highlight: the highlighter surface
      * shutdown(): close underlying resources

    Storage DSNs (via smartkeys.DB.api.make_store):
      - "sqlite:///path/to/smartkeys.sqlite"
      - "memory://"
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        catalog: Optional[LanguageCatalog] = None,
        store: Optional[KeyValueStore] = None,
        *,
        db_dsn: Optional[str] = None,
        verbose: bool = CFG.VERBOSE,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["SMARTKEYS_VERBOSE"] = "1"

        self.catalog = catalog or LanguageCatalog()
        if store is None:
            dsn = db_dsn or CFG.DB_DSN
            log.info("Initializing key-value store: %s", dsn)
            store = make_store(dsn)
        self._store: Optional[KeyValueStore] = store

        self.templates = TemplateHistoryStore(store)
        self.templates.load()
        self.customizations = CustomizationStore(store)
        log.info("Engine ready: %d languages", len(self.catalog))

    # ------------- languages -------------

    # /* ~~~ key wins over filename; anything unknown resolves to the default ~~~ */
    def language(self, key: Optional[str] = None, filename: Optional[str] = None) -> LanguageDefinition:
        if key and key in self.catalog.keys():
            return self.catalog.by_key(key)
        if filename:
            return self.catalog.by_extension(filename)
        return self.catalog.by_key(key)

    def candidate_pool(self, language: LanguageDefinition) -> List[SnippetItem]:
        tabs = self.customizations.load(language)
        return build_candidate_pool([tab for tab in tabs if tab.data])

    # ------------- keyboard callbacks -------------

    def get_predictions(
        self,
        pool: Sequence[SnippetItem],
        context: TypingContext,
        language: LanguageDefinition,
        limit: int = CFG.TOP_K,
    ) -> List[Prediction]:
        return rank(pool, context, language, limit)

    # /* ~~~ Rank the keyboard buttons for a cursor position in `text` ~~~ */
    def predict(
        self,
        text: str,
        cursor: Optional[int] = None,
        language: Optional[LanguageDefinition] = None,
        limit: int = CFG.TOP_K,
    ) -> List[Prediction]:
        language = language or self.catalog.default
        context = extract_context(text, len(text) if cursor is None else cursor)
        return self.get_predictions(self.candidate_pool(language), context, language, limit)

    def expand_insertion_text(self, button: SnippetItem, context: TypingContext, language: LanguageDefinition) -> str:
        return expand(button, context, language)

    def on_selection_confirmed(self, button: SnippetItem, context: TypingContext) -> None:
        record_selection(button, context)

    def find_button(self, language: LanguageDefinition, button_id: str) -> Optional[SnippetItem]:
        for tab in self.customizations.load(language):
            for button in tab.data:
                if button.id == button_id:
                    return button
        return None

    # ------------- highlighting -------------

    def classify(self, line: str, language: LanguageDefinition) -> List[Token]:
        return classify(line, language)

    def highlight(self, text: str, language: LanguageDefinition) -> List[List[Token]]:
        return classify_text(text, language)

    # ------------- teardown -------------

    # /* ~~~ Close underlying resources (DB handles, etc.) ~~~ */
    def shutdown(self) -> None:
        try:
            if self._store:
                self._store.close()
        finally:
            self._store = None
            log.info("Engine shutdown complete")
