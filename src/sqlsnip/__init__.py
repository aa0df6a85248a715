from sqlsnip.core.generator import generate
from sqlsnip.core.project import find_project_dir, find_schema_from_path
from sqlsnip.core.selector import select_lines
from sqlsnip.core.source import load_source, snip
from sqlsnip.errors import (
    MissingFileError,
    ProjectRootNotFoundError,
    SchemaNotDerivableError,
    SourceDecodeError,
    SqlsnipError,
)
from sqlsnip.models import LineRange, ObjectKind, SearchPathDirective, SearchPathMode, SelectionResult

__version__ = "0.1.0"

__all__ = [
    "LineRange",
    "MissingFileError",
    "ObjectKind",
    "ProjectRootNotFoundError",
    "SchemaNotDerivableError",
    "SearchPathDirective",
    "SearchPathMode",
    "SelectionResult",
    "SourceDecodeError",
    "SqlsnipError",
    "__version__",
    "find_project_dir",
    "find_schema_from_path",
    "generate",
    "load_source",
    "select_lines",
    "snip",
]
