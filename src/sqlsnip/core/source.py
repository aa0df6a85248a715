from pathlib import Path

from sqlsnip.core.generator import generate
from sqlsnip.core.selector import select_lines
from sqlsnip.errors import MissingFileError, SourceDecodeError
from sqlsnip.models import LineRange, SearchPathDirective


def load_source(path: str | Path) -> list[str]:
    """Read *path* as UTF-8 lines. Only ``\\n`` ends a line, so line numbers match the file."""
    file_path = Path(path)
    if not file_path.is_file():
        raise MissingFileError(str(path))
    try:
        with file_path.open(encoding="utf-8", newline="\n") as f:
            return [line.removesuffix("\n") for line in f]
    except UnicodeDecodeError as e:
        raise SourceDecodeError(str(path), e.reason) from e


def snip(
    path: str | Path,
    start: int | None = None,
    stop: int | None = None,
    search_path: str | None = None,
    interactive: bool = False,
    include_source: bool = False,
) -> list[str]:
    """Return the drop statements for lines *start*..*stop* of *path*, optionally followed by the lines."""
    directive = SearchPathDirective.from_option(search_path)
    line_range = LineRange(start=start, stop=stop)
    selection = select_lines(load_source(path), line_range, directive.given)
    stmts = generate(selection, directive, interactive=interactive, source_path=path)
    if include_source:
        stmts.extend(selection.lines)
    return stmts
