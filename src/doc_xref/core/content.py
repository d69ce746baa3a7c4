import logging
from pathlib import Path

from doc_xref.core.languages import detect_language_from_path
from doc_xref.models import DocumentationUnit, SourceFile

logger = logging.getLogger(__name__)

README_NAME = "README.md"


def _tab_order(source: SourceFile) -> tuple[int, str]:
    # Contracts first, then tests and scripts, alphabetically within each group.
    return (0 if source.language == "solidity" else 1, source.name)


def load_source_file(path: str | Path, language: str | None = None) -> SourceFile:
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None
    return SourceFile(
        name=file_path.name,
        content=content,
        language=language or detect_language_from_path(file_path),
    )


def load_unit(directory: str | Path) -> DocumentationUnit:
    """Load a README and its source files from one content directory."""
    unit_dir = Path(directory)
    if not unit_dir.is_dir():
        raise FileNotFoundError(f"Content directory not found: {directory}")

    readme_path = unit_dir / README_NAME
    if readme_path.is_file():
        readme = readme_path.read_text(encoding="utf-8")
    else:
        logger.warning("README not found for %s", unit_dir.name)
        readme = ""

    files = [
        load_source_file(path)
        for path in sorted(unit_dir.iterdir())
        if path.is_file() and path.name != README_NAME and not path.name.startswith(".")
    ]
    if not files:
        logger.warning("No code files for %s", unit_dir.name)

    return DocumentationUnit(id=unit_dir.name, readme=readme, files=sorted(files, key=_tab_order))


def list_units(root: str | Path) -> list[str]:
    """Names of the content directories under ``root``, sorted."""
    root_dir = Path(root)
    if not root_dir.is_dir():
        raise FileNotFoundError(f"Content root not found: {root}")
    return sorted(p.name for p in root_dir.iterdir() if p.is_dir() and not p.name.startswith("."))
