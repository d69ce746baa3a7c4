import logging

logger = logging.getLogger(__name__)


def locate_block(source: str, snippet: str) -> list[int]:
    """Return the 1-based line range where ``snippet`` first appears in ``source``.

    Each trimmed snippet line only has to be a substring of the corresponding
    source line. Later repetitions of the snippet are not reported.
    """
    trimmed = snippet.strip()
    if not trimmed:
        return []

    snippet_lines = [line.strip() for line in trimmed.split("\n")]
    source_lines = source.split("\n")
    window = len(snippet_lines)

    for start in range(len(source_lines) - window + 1):
        if all(snippet_lines[j] in source_lines[start + j] for j in range(window)):
            logger.debug("Snippet of %d line(s) matched at line %d", window, start + 1)
            return list(range(start + 1, start + window + 1))

    return []
