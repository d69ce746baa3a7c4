import logging
import re

from doc_xref.core.errors import EmptyIdentifierError
from doc_xref.models import HighlightConfig, HighlightMatch

logger = logging.getLogger(__name__)


def _identifier_pattern(identifier: str) -> re.Pattern[str]:
    # ASCII word boundaries: an identifier never matches inside a longer token.
    return re.compile(rf"\b{re.escape(identifier)}\b", re.ASCII)


def locate_occurrences(source: str, identifier: str) -> HighlightConfig:
    """Find every word-bounded occurrence of ``identifier`` in ``source``.

    Lines are scanned independently; ``lines`` holds the sorted unique line
    numbers and ``tokens`` every match in line-major, left-to-right order.
    """
    if not identifier:
        raise EmptyIdentifierError("Cannot locate an empty identifier.")

    pattern = _identifier_pattern(identifier)
    lines: set[int] = set()
    tokens: list[HighlightMatch] = []

    for index, line in enumerate(source.split("\n")):
        line_number = index + 1
        for match in pattern.finditer(line):
            lines.add(line_number)
            tokens.append(HighlightMatch(line=line_number, column=match.start(), length=len(identifier)))

    logger.debug("Located %d occurrence(s) of %r on %d line(s)", len(tokens), identifier, len(lines))
    return HighlightConfig(lines=sorted(lines), tokens=tokens)
