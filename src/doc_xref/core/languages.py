from pathlib import Path

PLAIN_TEXT = "text"

_LANGUAGE_ALIASES = {
    "c#": "csharp",
    "csharp": "csharp",
    "cpp": "cpp",
    "c++": "cpp",
    "cs": "csharp",
    "css": "css",
    "go": "go",
    "golang": "go",
    "html": "html",
    "java": "java",
    "javascript": "javascript",
    "js": "javascript",
    "json": "json",
    "md": "markdown",
    "markdown": "markdown",
    "plaintext": PLAIN_TEXT,
    "python": "python",
    "py": "python",
    "rb": "ruby",
    "ruby": "ruby",
    "rs": "rust",
    "rust": "rust",
    "sh": "bash",
    "shell": "bash",
    "bash": "bash",
    "sol": "solidity",
    "solidity": "solidity",
    "text": PLAIN_TEXT,
    "toml": "toml",
    "ts": "typescript",
    "tsx": "tsx",
    "txt": PLAIN_TEXT,
    "typescript": "typescript",
    "yaml": "yaml",
    "yml": "yaml",
    "c": "c",
}

_EXTENSION_LANGUAGE_MAP = {
    ".c": "c",
    ".cc": "cpp",
    ".cpp": "cpp",
    ".cs": "csharp",
    ".cxx": "cpp",
    ".go": "go",
    ".h": "c",
    ".hh": "cpp",
    ".hpp": "cpp",
    ".htm": "html",
    ".html": "html",
    ".java": "java",
    ".js": "javascript",
    ".json": "json",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".md": "markdown",
    ".markdown": "markdown",
    ".py": "python",
    ".rb": "ruby",
    ".rs": "rust",
    ".scss": "css",
    ".css": "css",
    ".sh": "bash",
    ".sol": "solidity",
    ".toml": "toml",
    ".ts": "typescript",
    ".tsx": "tsx",
    ".yaml": "yaml",
    ".yml": "yaml",
}

# Languages with a tree-sitter grammar; anything else renders as plain text.
_GRAMMAR_LANGUAGES = frozenset(_EXTENSION_LANGUAGE_MAP.values())

_SUPPORTED_LANGUAGES = _GRAMMAR_LANGUAGES | {PLAIN_TEXT}


def normalize_language(language: str) -> str:
    normalized = language.strip().lower()
    resolved = _LANGUAGE_ALIASES.get(normalized, normalized)
    if resolved not in _SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language '{language}'. Supported: {sorted(_SUPPORTED_LANGUAGES)}")
    return resolved


def detect_language_from_path(file_path: Path) -> str:
    """Language for a source file; unknown extensions fall back to plain text."""
    return _EXTENSION_LANGUAGE_MAP.get(file_path.suffix.lower(), PLAIN_TEXT)


def resolve_language(language: str | None, file_path: Path | None) -> str:
    if language:
        return normalize_language(language)
    if file_path:
        return detect_language_from_path(file_path)
    raise ValueError("Language must be provided when no file path is available.")


def grammar_for(language: str) -> str | None:
    """Tree-sitter grammar name for ``language``, or ``None`` for plain text."""
    normalized = _LANGUAGE_ALIASES.get(language.strip().lower(), language.strip().lower())
    return normalized if normalized in _GRAMMAR_LANGUAGES else None


def is_source_path(file_path: Path) -> bool:
    return file_path.suffix.lower() in _EXTENSION_LANGUAGE_MAP
