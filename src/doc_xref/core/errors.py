class DocXrefError(Exception):
    """Base class for errors raised by doc-xref itself."""


class EmptyIdentifierError(DocXrefError, ValueError):
    """Raised when an empty identifier reaches the occurrence locator."""


class MalformedTokenTreeError(DocXrefError, TypeError):
    """Raised when ``annotate`` receives a tree it cannot walk."""
