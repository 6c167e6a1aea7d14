"""Statement vocabulary for the Solitude language.

Solitude has no grammar beyond string prefixes: every physical line is
one statement and its kind is decided by what the trimmed line starts
with. This module holds the fixed prefix table and the `classify`
step that turns a raw line into a `Statement`. Classification is kept
apart from execution so that both can be tested on their own.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# Comments
ML_COMMENT = "..."
SL_COMMENT = "."

# Variables
VAR_DECLARE = "var "
VAR_DELETE = "-"
VAR_GET = "$"

# Functions
FUNC_BEGIN = "func "
FUNC_END = "cnuf"
FUNC_CALL = "call "

# Conditionals
IF_BEGIN = "if "
IF_END = "fi"

# Threading
THREAD_OUTSIDE_BEGIN = "!!"
THREAD_INSIDE_BEGIN = "{"
THREAD_INSIDE_END = "}"
THREAD_OUTSIDE_END = "??"

# Input
INPUT_VAR = "input "
INPUT_VAR_SPLIT = "->"
DEFAULT_PROMPT = "Enter value: "


class StatementKind(Enum):
    BLANK = "blank"
    COMMENT = "comment"
    BLOCK_COMMENT = "block_comment"
    DECLARE = "declare"
    DELETE = "delete"
    IF = "if"
    FUNC = "func"
    CALL = "call"
    INPUT = "input"
    SPAWN = "spawn"
    OUTPUT = "output"


@dataclass(frozen=True)
class Statement:
    kind: StatementKind
    text: str  # the trimmed line
    argument: str = ""  # whatever follows the prefix


# Checked in order after blanks and comments have been ruled out.
_PREFIXES = (
    (THREAD_OUTSIDE_BEGIN, StatementKind.SPAWN),
    (VAR_DECLARE, StatementKind.DECLARE),
    (VAR_DELETE, StatementKind.DELETE),
    (IF_BEGIN, StatementKind.IF),
    (FUNC_BEGIN, StatementKind.FUNC),
    (FUNC_CALL, StatementKind.CALL),
    (INPUT_VAR, StatementKind.INPUT),
)


def classify(line: str) -> Statement:
    """Classify one raw script line by its prefix."""
    text = line.strip()
    if not text:
        return Statement(StatementKind.BLANK, text)
    if text == ML_COMMENT:
        return Statement(StatementKind.BLOCK_COMMENT, text)
    if text.startswith(SL_COMMENT):
        return Statement(StatementKind.COMMENT, text, text[len(SL_COMMENT):])
    for prefix, kind in _PREFIXES:
        if text.startswith(prefix):
            return Statement(kind, text, text[len(prefix):].strip())
    return Statement(StatementKind.OUTPUT, text, text)


def is_terminator(line: str, marker: str) -> bool:
    """True if `line` closes a block opened for `marker`.

    The comment delimiter must match exactly; every other closing
    sentinel matches on prefix.
    """
    text = line.strip()
    if marker == ML_COMMENT:
        return text == ML_COMMENT
    return text.startswith(marker)
