"""Text passes applied to literal output, prompts and conditions.

`interpolate` substitutes `$name` references with values from a
`VariableStore`; `decode_escapes` resolves backslash escapes. Both are
single left-to-right passes: nothing they produce is scanned again.
"""

from __future__ import annotations

import string
from typing import Callable, List, Optional

from .environment import VariableStore
from .errors import UndefinedVariable
from .syntax import VAR_GET

HEX_DIGITS = frozenset(string.hexdigits)
ESC = '\x1b'

_SIMPLE_ESCAPES = {
    'n': '\n',
    'r': '\r',
    't': '\t',
}


def is_ident_char(c: str) -> bool:
    return c.isalnum() or c == '_'


def interpolate(
    text: str,
    variables: VariableStore,
    on_error: Optional[Callable[[UndefinedVariable], None]] = None,
) -> str:
    """Replace every `$identifier` in `text` with the variable's value.

    An undefined reference is replaced by nothing; the error is handed
    to `on_error` so the caller can report it.
    """
    if VAR_GET not in text:
        return text
    result: List[str] = []
    i = 0
    length = len(text)
    while i < length:
        c = text[i]
        if c != VAR_GET:
            result.append(c)
            i += 1
            continue
        # `$` starts a reference; identifier characters extend it
        start = i + 1
        end = start
        while end < length and is_ident_char(text[end]):
            end += 1
        name = text[start:end]
        try:
            result.append(variables.get(name))
        except UndefinedVariable as e:
            if on_error is not None:
                on_error(e)
        i = end
    return ''.join(result)


def decode_escapes(text: str) -> str:
    r"""Resolve `\n`, `\r`, `\t`, `\xHH` and `\033` in `text`.

    Unrecognized sequences are emitted verbatim, backslash included.
    """
    if '\\' not in text:
        return text
    result: List[str] = []
    i = 0
    length = len(text)
    while i < length:
        c = text[i]
        if c != '\\' or i + 1 >= length:
            result.append(c)
            i += 1
            continue
        nxt = text[i + 1]
        if nxt in _SIMPLE_ESCAPES:
            result.append(_SIMPLE_ESCAPES[nxt])
            i += 2
        elif nxt == 'x' and _is_hex_pair(text[i + 2:i + 4]):
            result.append(chr(int(text[i + 2:i + 4], 16)))
            i += 4
        elif text.startswith('033', i + 1):
            result.append(ESC)
            i += 4
        else:
            result.append(c)
            i += 1
    return ''.join(result)


def _is_hex_pair(s: str) -> bool:
    return len(s) == 2 and all(ch in HEX_DIGITS for ch in s)
