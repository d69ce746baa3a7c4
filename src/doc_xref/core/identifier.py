import re

_CALL_ARGS = re.compile(r"\([^)]*\)")
_TRAILING_PUNCTUATION = re.compile(r"[.;,]+\Z")


def extract_identifier(raw: str) -> str:
    """Normalize an inline code reference into a searchable identifier.

    ``"FHE.add()"`` -> ``"FHE.add"``, ``"euint32"`` -> ``"euint32"``,
    ``"_count;"`` -> ``"_count"``. Pure punctuation yields ``""``.
    """
    clean = _CALL_ARGS.sub("", raw)
    clean = _TRAILING_PUNCTUATION.sub("", clean)
    return clean.strip()
