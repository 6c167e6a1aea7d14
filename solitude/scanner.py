"""Block scanner for the Solitude language.

Structured statements are delimited by sentinel lines rather than by
nesting in a grammar. Each scanner below takes the whole line list of
the current block plus a cursor sitting on the opening line, and
returns the raw interior lines together with a cursor positioned just
past the closing line. Scanning is a single forward pass. A construct
that is never closed runs to the end of the input without complaint.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .syntax import (
    ML_COMMENT, IF_END, FUNC_END,
    THREAD_INSIDE_BEGIN, THREAD_INSIDE_END, THREAD_OUTSIDE_END,
    is_terminator,
)

Scan = Tuple[List[str], int]


def scan_until(lines: Sequence[str], cursor: int, marker: str) -> Scan:
    """Collect lines after `cursor` up to the first line closing `marker`."""
    body: List[str] = []
    i = cursor + 1
    while i < len(lines):
        if is_terminator(lines[i], marker):
            return body, i + 1
        body.append(lines[i])
        i += 1
    return body, i


def scan_comment(lines: Sequence[str], cursor: int) -> Scan:
    return scan_until(lines, cursor, ML_COMMENT)


def scan_conditional(lines: Sequence[str], cursor: int) -> Scan:
    # One level only: the first `fi` closes the block even if an inner
    # `if` was opened inside it.
    return scan_until(lines, cursor, IF_END)


def scan_function(lines: Sequence[str], cursor: int) -> Scan:
    return scan_until(lines, cursor, FUNC_END)


def scan_concurrent(lines: Sequence[str], cursor: int) -> Scan:
    """Carve a `!!` ... `??` block.

    Lines inside `{` ... `}` sub-blocks are flattened into the same list
    as the lines that sit directly inside the concurrent block; the
    brace lines themselves are dropped.
    """
    body: List[str] = []
    i = cursor + 1
    while i < len(lines):
        line = lines[i]
        if is_terminator(line, THREAD_OUTSIDE_END):
            return body, i + 1
        if is_terminator(line, THREAD_INSIDE_BEGIN):
            inner, i = scan_until(lines, i, THREAD_INSIDE_END)
            body.extend(inner)
            continue
        body.append(line)
        i += 1
    return body, i
