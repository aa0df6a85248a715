import logging
from collections.abc import Iterable

from sqlsnip.core.rules import SEARCH_PATH_RE
from sqlsnip.models import LineRange, SelectionResult

logger = logging.getLogger(__name__)


def select_lines(
    lines: Iterable[str],
    line_range: LineRange | None = None,
    explicit_search_path_given: bool = False,
) -> SelectionResult:
    """Select the non-blank lines in *line_range* and discover a preceding search path.

    Discovery only runs when no search path was given explicitly. It keeps
    overwriting the discovered value until the first line is selected, so the
    last ``set search_path`` before the snippet wins. This also holds without a
    range: a file that opens with ``set search_path`` has it taken as the
    discovered value, which is then emitted first just as a pass-through would be.
    """
    line_range = line_range or LineRange()
    selected: list[str] = []
    search_path: str | None = None

    for lineno, raw in enumerate(lines, start=1):
        if line_range.past(lineno):
            break
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        if not selected and not explicit_search_path_given and SEARCH_PATH_RE.match(line):
            search_path = line
        elif not line_range.before(lineno):
            selected.append(line)

    if search_path is not None:
        logger.debug("Discovered search path before line %s: %s", line_range.start or 1, search_path)
    return SelectionResult(lines=tuple(selected), search_path=search_path)
