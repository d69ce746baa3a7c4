import logging

from doc_xref.core.hover import block_config, identifier_config
from doc_xref.core.references import scan_references
from doc_xref.models import (
    CodeReference,
    DocumentationUnit,
    HighlightConfig,
    ReferenceKind,
    ReferenceReport,
    SourceFile,
)

logger = logging.getLogger(__name__)


def resolve_reference(reference: CodeReference, source: SourceFile) -> HighlightConfig:
    """Highlight a hover over ``reference`` would produce on ``source``."""
    if reference.kind is ReferenceKind.BLOCK:
        return block_config(source.content, reference.text)
    return identifier_config(source.content, reference.text)


def audit_unit(unit: DocumentationUnit) -> list[ReferenceReport]:
    """Resolve every README reference of ``unit`` against each of its files."""
    reports = [
        ReferenceReport(
            reference=reference,
            matches={source.name: resolve_reference(reference, source) for source in unit.files},
        )
        for reference in scan_references(unit.readme)
    ]
    unresolved = sum(1 for report in reports if not report.resolved)
    logger.info("Audited %s: %d reference(s), %d unresolved", unit.id, len(reports), unresolved)
    return reports
