"""Theme palettes and highlight marker styles."""

from __future__ import annotations

import logging

from doc_xref.models import StyleMarker

logger = logging.getLogger(__name__)

DEFAULT_THEME = "github-dark"

THEMES: dict[str, dict[str, str]] = {
    "github-dark": {
        "keyword": "#FF7B72",
        "string": "#A5D6FF",
        "comment": "#8B949E",
        "number": "#79C0FF",
        "identifier": "#E6EDF3",
        "type": "#FFA657",
        "punctuation": "#C9D1D9",
        "plain": "#C9D1D9",
    },
    "github-light": {
        "keyword": "#CF222E",
        "string": "#0A3069",
        "comment": "#6E7781",
        "number": "#0550AE",
        "identifier": "#24292F",
        "type": "#953800",
        "punctuation": "#24292F",
        "plain": "#24292F",
    },
}

# CSS classes attached by the web viewer.
MARKER_CLASSES: dict[StyleMarker, str] = {
    StyleMarker.SUBTLE: "bg-white/5 border-l-2 border-l-amber-500/50",
    StyleMarker.STRONG: (
        "bg-amber-400/30 border border-amber-500 rounded px-0.5 ring-2 ring-amber-500/50 shadow-lg shadow-amber-500/20"
    ),
}

# Terminal equivalents used by the CLI.
MARKER_STYLES: dict[StyleMarker, str] = {
    StyleMarker.SUBTLE: "on #2A2A2A",
    StyleMarker.STRONG: "bold #1A1A1A on #F5B942",
}

LINE_ACCENT = "▎"


def resolve_theme(theme: str | None) -> str:
    """Return a known theme name, falling back to the default for unknown ones."""
    if not theme:
        return DEFAULT_THEME
    if theme not in THEMES:
        logger.warning("Unknown theme %r, falling back to %s", theme, DEFAULT_THEME)
        return DEFAULT_THEME
    return theme


def scope_color(theme: str, scope: str) -> str:
    palette = THEMES.get(theme, THEMES[DEFAULT_THEME])
    return palette.get(scope, palette["plain"])


def marker_classes(markers: tuple[StyleMarker, ...]) -> str:
    return " ".join(MARKER_CLASSES[m] for m in markers)
