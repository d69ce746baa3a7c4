import os

from doc_xref.styles import DEFAULT_THEME


def get_theme() -> str:
    return os.getenv("DOC_XREF_THEME", DEFAULT_THEME)


def get_content_root() -> str:
    return os.getenv("DOC_XREF_CONTENT_DIR", "content")
