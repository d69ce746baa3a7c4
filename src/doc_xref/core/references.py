"""Find the code references of a README: inline code spans and code blocks.

Only the parts of Markdown that matter for cross-referencing are recognized.
A fenced block with a language becomes a block reference; every other code
element (inline spans, indented blocks, fences without a language) is an
identifier reference.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from doc_xref.models import CodeReference, ReferenceKind

_FENCE_OPEN = re.compile(r"^(?P<indent> {0,3})(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
_INLINE_CODE = re.compile(r"(?<!`)(?P<ticks>`+)(?!`)(?P<body>.+?)(?<!`)(?P=ticks)(?!`)", re.DOTALL)
_CODE_INDENT = 4


@dataclass
class _Fence:
    char: str
    length: int
    indent: int
    language: str | None
    start_line: int
    body: list[str]


@dataclass
class _IndentedBlock:
    start_line: int
    body: list[str]


def _is_closing_fence(line: str, fence: _Fence) -> bool:
    stripped = line.lstrip(" ")
    if len(line) - len(stripped) > 3:
        return False
    run = len(stripped) - len(stripped.lstrip(fence.char))
    return run >= fence.length and not stripped[run:].strip()


def _dedent(line: str, indent: int) -> str:
    removable = len(line) - len(line.lstrip(" "))
    return line[min(indent, removable) :]


def _normalize_inline(body: str) -> str:
    body = body.replace("\r\n", " ").replace("\n", " ")
    if len(body) >= 2 and body.startswith(" ") and body.endswith(" ") and body.strip(" "):
        return body[1:-1]
    return body


def _fence_reference(fence: _Fence) -> CodeReference:
    text = "\n".join(fence.body)
    if fence.language and text:
        return CodeReference(kind=ReferenceKind.BLOCK, text=text, language=fence.language, line=fence.start_line)
    return CodeReference(kind=ReferenceKind.IDENTIFIER, text=text, line=fence.start_line)


def _is_escaped(text: str, index: int) -> bool:
    backslashes = 0
    while index - backslashes > 0 and text[index - backslashes - 1] == "\\":
        backslashes += 1
    return backslashes % 2 == 1


def _inline_references(paragraph: list[str], first_line: int) -> list[CodeReference]:
    chunk = "\n".join(paragraph)
    refs: list[CodeReference] = []
    pos = 0
    while True:
        match = _INLINE_CODE.search(chunk, pos)
        if match is None:
            return refs
        if _is_escaped(chunk, match.start()):
            # A backslash-escaped backtick is literal text.
            pos = match.start() + 1
            continue
        line = first_line + chunk.count("\n", 0, match.start())
        refs.append(
            CodeReference(kind=ReferenceKind.IDENTIFIER, text=_normalize_inline(match.group("body")), line=line)
        )
        pos = match.end()


def _indent_width(line: str) -> int:
    expanded = line.expandtabs(4)
    return len(expanded) - len(expanded.lstrip(" "))


def _indented_reference(block: _IndentedBlock) -> CodeReference:
    body = list(block.body)
    while body and not body[-1].strip():
        body.pop()
    return CodeReference(kind=ReferenceKind.IDENTIFIER, text="\n".join(body), line=block.start_line)


def scan_references(readme: str) -> list[CodeReference]:
    """Return the code references of ``readme`` in document order.

    Inline spans never cross a paragraph break. Code indented by four columns
    outside a paragraph is an indented code block and is not scanned for spans.
    """
    refs: list[CodeReference] = []
    paragraph: list[str] = []
    paragraph_start = 1
    fence: _Fence | None = None
    indented: _IndentedBlock | None = None

    for index, line in enumerate(readme.split("\n")):
        line_number = index + 1
        if fence is not None:
            if _is_closing_fence(line, fence):
                refs.append(_fence_reference(fence))
                fence = None
            else:
                fence.body.append(_dedent(line, fence.indent))
            continue

        if indented is not None:
            if not line.strip() or _indent_width(line) >= _CODE_INDENT:
                indented.body.append(_dedent(line.expandtabs(4), _CODE_INDENT))
                continue
            refs.append(_indented_reference(indented))
            indented = None

        opening = _FENCE_OPEN.match(line)
        if opening and not (opening.group("fence")[0] == "`" and "`" in opening.group("info")):
            refs.extend(_inline_references(paragraph, paragraph_start))
            paragraph = []
            info = opening.group("info").strip()
            fence = _Fence(
                char=opening.group("fence")[0],
                length=len(opening.group("fence")),
                indent=len(opening.group("indent")),
                language=info.split()[0] if info else None,
                start_line=line_number,
                body=[],
            )
            continue

        if not line.strip():
            refs.extend(_inline_references(paragraph, paragraph_start))
            paragraph = []
            continue

        if not paragraph and _indent_width(line) >= _CODE_INDENT:
            # Indented code cannot interrupt a paragraph.
            indented = _IndentedBlock(start_line=line_number, body=[_dedent(line.expandtabs(4), _CODE_INDENT)])
            continue

        if not paragraph:
            paragraph_start = line_number
        paragraph.append(line)

    if fence is not None:
        # An unclosed fence runs to the end of the document.
        refs.append(_fence_reference(fence))
    if indented is not None:
        refs.append(_indented_reference(indented))
    refs.extend(_inline_references(paragraph, paragraph_start))
    return refs
