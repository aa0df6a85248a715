"""Directory-convention lookup of the project root and the schema a source file belongs to."""

import logging
import os
from pathlib import Path

from sqlsnip.errors import ProjectRootNotFoundError, SchemaNotDerivableError

logger = logging.getLogger(__name__)

_DEFAULT_MARKER = "prick.yml"
_DEFAULT_SCHEMA_DIR = "schema"


def project_marker() -> str:
    return os.getenv("SQLSNIP_PROJECT_MARKER", _DEFAULT_MARKER)


def schema_dir_name() -> str:
    return os.getenv("SQLSNIP_SCHEMA_DIR", _DEFAULT_SCHEMA_DIR)


def find_project_dir(path: str | Path, marker: str | None = None) -> Path:
    """Search upwards from *path* for the directory holding the project marker file."""
    marker = marker or project_marker()
    start = Path(path).absolute()
    current = start
    while not (current / marker).exists():
        if current.parent == current:
            raise ProjectRootNotFoundError(str(start), marker)
        current = current.parent
    logger.info("Project directory: %s", current)
    return current


def find_schema_from_path(file: str | Path, marker: str | None = None, schema_dir: str | None = None) -> str:
    """Derive the schema from the segment after the schema folder in the file's directory."""
    schema_dir = schema_dir or schema_dir_name()
    directory = Path(file).absolute().parent
    project_dir = find_project_dir(directory, marker)
    parts = directory.relative_to(project_dir).parts
    for folder, schema in zip(parts, parts[1:]):
        if folder == schema_dir:
            logger.info("Schema derived from %s: %s", file, schema)
            return schema
    raise SchemaNotDerivableError(str(file))
