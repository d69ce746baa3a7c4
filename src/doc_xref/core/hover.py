"""Viewer state: the active file tab and the hover-driven highlight."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from dataclasses import dataclass

from doc_xref.core.block import locate_block
from doc_xref.core.identifier import extract_identifier
from doc_xref.core.locator import locate_occurrences
from doc_xref.models import HighlightConfig, SourceFile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActiveIdentifier:
    text: str


@dataclass(frozen=True)
class ActiveBlock:
    text: str


HoverContext = ActiveIdentifier | ActiveBlock | None


@dataclass(frozen=True)
class SetHighlight:
    config: HighlightConfig
    context: ActiveIdentifier | ActiveBlock


@dataclass(frozen=True)
class ClearHighlight:
    pass


HighlightAction = SetHighlight | ClearHighlight


@dataclass(frozen=True)
class ViewerSnapshot:
    active_tab: str
    context: HoverContext
    config: HighlightConfig

    @property
    def hovering(self) -> bool:
        return self.context is not None


def identifier_config(source: str, raw: str) -> HighlightConfig:
    identifier = extract_identifier(raw)
    if not identifier:
        return HighlightConfig()
    return locate_occurrences(source, identifier)


def block_config(source: str, snippet: str) -> HighlightConfig:
    return HighlightConfig(lines=locate_block(source, snippet), tokens=[])


class ViewerState:
    """Single owner of the hover context and the active tab.

    Every write is serialized by one lock and the last write wins. A hover
    is resolved against the tab that is active while the lock is held, so a
    concurrent tab switch never receives a config computed for another file.
    """

    def __init__(self, files: Sequence[SourceFile]) -> None:
        self._lock = threading.Lock()
        self._files = {f.name: f for f in files}
        self._active_tab = files[0].name if files else ""
        self._context: HoverContext = None
        self._config = HighlightConfig()

    @property
    def files(self) -> list[SourceFile]:
        return list(self._files.values())

    @property
    def active_file(self) -> SourceFile | None:
        return self._files.get(self._active_tab)

    @property
    def config(self) -> HighlightConfig:
        return self._config

    @property
    def context(self) -> HoverContext:
        return self._context

    def snapshot(self) -> ViewerSnapshot:
        with self._lock:
            return ViewerSnapshot(active_tab=self._active_tab, context=self._context, config=self._config)

    def dispatch(self, action: HighlightAction) -> None:
        with self._lock:
            self._apply(action)

    def select_tab(self, name: str) -> None:
        if name not in self._files:
            raise ValueError(f"Unknown file tab '{name}'. Available: {sorted(self._files)}")
        with self._lock:
            self._active_tab = name
            self._apply(ClearHighlight())

    def pointer_enter_inline(self, raw: str) -> None:
        with self._lock:
            active = self._files.get(self._active_tab)
            if active is None:
                return
            self._enter(identifier_config(active.content, raw), ActiveIdentifier(raw))

    def pointer_enter_block(self, snippet: str) -> None:
        with self._lock:
            active = self._files.get(self._active_tab)
            if active is None:
                return
            self._enter(block_config(active.content, snippet), ActiveBlock(snippet))

    def pointer_leave(self) -> None:
        self.dispatch(ClearHighlight())

    def _apply(self, action: HighlightAction) -> None:
        # Caller holds the lock.
        if isinstance(action, SetHighlight):
            self._context = action.context
            self._config = action.config
        else:
            self._context = None
            self._config = HighlightConfig()

    def _enter(self, config: HighlightConfig, context: ActiveIdentifier | ActiveBlock) -> None:
        # The config is computed and committed under the same lock as the
        # active tab it was computed for.
        if config.is_empty():
            logger.debug("Hover on %r matched nothing in %s", context.text, self._active_tab)
            self._apply(ClearHighlight())
            return
        self._apply(SetHighlight(config=config, context=context))
