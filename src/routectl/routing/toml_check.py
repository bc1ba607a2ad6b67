"""Best-effort structural check for generated or hand-edited route TOML.

This is a line-oriented sanity check, not a TOML parser. It catches the
mistakes that show up when route blocks are edited by hand: unclosed
table headers, empty table names, malformed assignments and unquoted or
badly quoted strings. Every line is checked; errors are collected and
returned together.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"[+-]?\d[\d_]*(\.\d+)?([eE][+-]?\d+)?")
_BOOLEAN = frozenset({"true", "false"})


@dataclass(frozen=True)
class SyntaxCheck:
    """Result of a syntax check."""

    valid: bool
    errors: list[str]


def _assignment_operators(line: str) -> list[int]:
    """Return the offsets of ``=`` characters outside quoted strings."""
    positions: list[int] = []
    quote: str | None = None
    escaped = False
    for i, ch in enumerate(line):
        if quote is not None:
            if escaped:
                escaped = False
            elif ch == "\\" and quote == '"':
                escaped = True
            elif ch == quote:
                quote = None
        elif ch in ('"', "'"):
            quote = ch
        elif ch == "=":
            positions.append(i)
    return positions


def _check_header(trimmed: str, line_num: int, errors: list[str]) -> None:
    if trimmed.startswith("[["):
        kind, opener, closer = "[[array]]", "[[", "]]"
    else:
        kind, opener, closer = "[section]", "[", "]"

    closed = trimmed.endswith(closer)
    if not closed:
        errors.append(f"Line {line_num}: Invalid {kind} syntax - missing closing {closer}")

    inner = trimmed[len(opener) : -len(closer)] if closed else trimmed[len(opener) :]
    if not inner.strip(" ]"):
        errors.append(f"Line {line_num}: Empty {kind} name")


def _closing_quote(value: str) -> int | None:
    """Offset of the quote closing the basic string that opens *value*."""
    escaped = False
    for i in range(1, len(value)):
        ch = value[i]
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == '"':
            return i
    return None


def _check_value(key: str, value: str, line_num: int, errors: list[str]) -> None:
    if value.startswith('"'):
        end = _closing_quote(value)
        if end is None:
            errors.append(f"Line {line_num}: Unterminated string value (key: {key})")
            return
        rest = value[end + 1 :].strip()
        if rest and not rest.startswith("#"):
            errors.append(f"Line {line_num}: Unescaped quote in string value (key: {key})")
        return

    if value.startswith(("'", "[", "{")):
        return
    if value in _BOOLEAN or _NUMBER.fullmatch(value):
        return
    errors.append(f"Line {line_num}: String values must be quoted (key: {key})")


def validate_toml_syntax(text: object) -> SyntaxCheck:
    """Check *text* line by line and collect every structural error.

    Blank lines and ``#`` comment lines are skipped. Never raises.
    """
    if not text or not isinstance(text, str):
        return SyntaxCheck(valid=False, errors=["TOML string is required"])

    errors: list[str] = []
    for line_num, line in enumerate(text.split("\n"), start=1):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue

        if trimmed.startswith("["):
            _check_header(trimmed, line_num, errors)
            continue

        operators = _assignment_operators(trimmed)
        if not operators:
            errors.append(f"Line {line_num}: Invalid key = value syntax - missing =")
            continue
        if len(operators) > 1:
            errors.append(f"Line {line_num}: Invalid key = value syntax - multiple equals signs")
            continue

        key = trimmed[: operators[0]].strip()
        value = trimmed[operators[0] + 1 :].strip()
        if not key:
            errors.append(f"Line {line_num}: Missing key before =")
        if not value:
            errors.append(f"Line {line_num}: Missing value after =")
            continue
        _check_value(key, value, line_num, errors)

    if errors:
        logger.debug("TOML syntax check found %d error(s)", len(errors))
    return SyntaxCheck(valid=not errors, errors=errors)
