"""Recognition patterns for ``create`` statements and the drop statements they reverse.

Matching is line based: a statement header must fit on one line. Keywords are
matched case-insensitively while captured names and types are kept verbatim.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from sqlsnip.models import ObjectKind

UID = r"[.\w]+"
_TABLE_MODIFIERS = r"(?:global|local|temporary|temp|unlogged)"
_VIEW_MODIFIERS = r"(?:temp|temporary|recursive)"
_TRIGGER_MODIFIERS = r"(?:constraint)"
_IF_NOT_EXISTS = r"(?:if\s+not\s+exists)"

SEARCH_PATH_RE = re.compile(r"^\s*set\s+search_path", re.IGNORECASE)
CREATE_RE = re.compile(r"^\s*create\s+(.*)", re.IGNORECASE)

TABLE_RE = re.compile(rf"(?:{_TABLE_MODIFIERS}\s+)*table\s+(?:{_IF_NOT_EXISTS}\s+)?({UID})", re.IGNORECASE)
VIEW_RE = re.compile(rf"(?:{_VIEW_MODIFIERS}\s+)*view\s+({UID})", re.IGNORECASE)
FUNCTION_RE = re.compile(rf"function\s+({UID})\s*\((.*?)\)\s*(?:returns\b|$)", re.IGNORECASE)
PROCEDURE_RE = re.compile(rf"(?:procedure|function)\s+({UID})\s*\((.*?)\)\s*(?:as\b|$)", re.IGNORECASE)
TRIGGER_RE = re.compile(rf"(?:{_TRIGGER_MODIFIERS}\s+)?trigger\s+({UID})\s+.*\s+on\s+({UID})", re.IGNORECASE)

_ARG_MODE_RE = re.compile(r"^(in|out|inout|variadic)\s+", re.IGNORECASE)
_ARG_NAME_RE = re.compile(rf"^{UID}\s++(?!default\b|=)", re.IGNORECASE)
# A default value runs up to the next comma, with at most one parenthesized group
_DEFAULT_VALUE = r"[^,(]*(?:\([^)]*\))?"
_ARG_DEFAULT_RE = re.compile(rf"\s*(?:\s+default\s+|=\s*){_DEFAULT_VALUE}", re.IGNORECASE)


def reduce_argument(arg: str) -> str:
    """Reduce one declared argument to its mode and type, e.g. ``out n integer default 5`` -> ``out integer``."""
    arg = arg.strip()
    mode = ""
    if m := _ARG_MODE_RE.match(arg):
        mode = m.group(1)
        arg = arg[m.end() :]
    arg = _ARG_NAME_RE.sub("", arg, count=1)
    arg = _ARG_DEFAULT_RE.sub("", arg, count=1).strip()
    return f"{mode} {arg}" if mode else arg


def reduce_arguments(args: str) -> str:
    # Default values are assumed to contain no commas
    if not args.strip():
        return ""
    return ", ".join(reduce_argument(arg) for arg in args.split(","))


@dataclass(frozen=True)
class DropRule:
    kind: ObjectKind
    pattern: re.Pattern[str]
    synthesize: Callable[[re.Match[str]], str]

    def apply(self, text: str) -> str | None:
        m = self.pattern.match(text)
        if m is None:
            return None
        return self.synthesize(m)


def _drop_named(kind: ObjectKind) -> Callable[[re.Match[str]], str]:
    def _synthesize(m: re.Match[str]) -> str:
        return f"drop {kind} if exists {m.group(1)} cascade;"

    return _synthesize


def _drop_routine(kind: ObjectKind) -> Callable[[re.Match[str]], str]:
    def _synthesize(m: re.Match[str]) -> str:
        return f"drop {kind} if exists {m.group(1)}({reduce_arguments(m.group(2))}) cascade;"

    return _synthesize


def _drop_trigger(m: re.Match[str]) -> str:
    return f"drop trigger if exists {m.group(1)} on {m.group(2)} cascade;"


# Evaluated in order; the first match wins
DROP_RULES: tuple[DropRule, ...] = (
    DropRule(ObjectKind.TABLE, TABLE_RE, _drop_named(ObjectKind.TABLE)),
    DropRule(ObjectKind.VIEW, VIEW_RE, _drop_named(ObjectKind.VIEW)),
    DropRule(ObjectKind.FUNCTION, FUNCTION_RE, _drop_routine(ObjectKind.FUNCTION)),
    DropRule(ObjectKind.PROCEDURE, PROCEDURE_RE, _drop_routine(ObjectKind.PROCEDURE)),
    DropRule(ObjectKind.TRIGGER, TRIGGER_RE, _drop_trigger),
)


def drop_statement_for(line: str) -> str | None:
    """Return the statement reversing *line*, the line itself for ``set search_path``, or None."""
    if SEARCH_PATH_RE.match(line):
        return line
    create = CREATE_RE.match(line)
    if create is None:
        return None
    for rule in DROP_RULES:
        stmt = rule.apply(create.group(1))
        if stmt is not None:
            return stmt
    return None
