import logging
from pathlib import Path

from sqlsnip.core.project import find_schema_from_path
from sqlsnip.core.rules import CREATE_RE, drop_statement_for
from sqlsnip.errors import SchemaNotDerivableError
from sqlsnip.models import SearchPathDirective, SearchPathMode, SelectionResult

logger = logging.getLogger(__name__)

INTERACTIVE_DIRECTIVE = r"\set ON_ERROR_STOP on"


def generate_drop_statements(lines: tuple[str, ...] | list[str]) -> list[str]:
    stmts: list[str] = []
    for line in lines:
        stmt = drop_statement_for(line)
        if stmt is None:
            if CREATE_RE.match(line):
                logger.debug("Skipping unrecognized create statement: %s", line.strip())
            continue
        stmts.append(stmt)
    return stmts


def search_path_statement(
    directive: SearchPathDirective,
    discovered: str | None,
    source_path: str | Path | None,
) -> str | None:
    """Resolve the statement that establishes the snippet's schema, if any."""
    match directive.mode:
        case SearchPathMode.SUPPRESSED:
            return None
        case SearchPathMode.EXPLICIT:
            return f"set search_path to {directive.schema_name};"
        case SearchPathMode.UNSET:
            if discovered is not None:
                return discovered
            if source_path is None:
                raise SchemaNotDerivableError("<no source file>")
            return f"set search_path to {find_schema_from_path(source_path)};"


def generate(
    selection: SelectionResult,
    directive: SearchPathDirective,
    interactive: bool = False,
    source_path: str | Path | None = None,
) -> list[str]:
    """Build the statement list: interactive directive, search path, then one drop per create line.

    ``source_path`` is only consulted when the search path is unset and none was
    discovered in the file.
    """
    stmts = generate_drop_statements(selection.lines)
    search_path = search_path_statement(directive, selection.search_path, source_path)
    if search_path is not None:
        stmts.insert(0, search_path)
    if interactive:
        stmts.insert(0, INTERACTIVE_DIRECTIVE)
    return stmts
