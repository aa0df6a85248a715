class SqlsnipError(Exception):
    """Base class for failures that abort a snippet run."""


class MissingFileError(SqlsnipError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Can't find {path}")
        self.path = path


class ProjectRootNotFoundError(SqlsnipError):
    def __init__(self, start: str, marker: str) -> None:
        super().__init__(f"Can't find project directory (no {marker} above {start})")
        self.start = start
        self.marker = marker


class SchemaNotDerivableError(SqlsnipError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Can't find schema from {path}")
        self.path = path


class SourceDecodeError(SqlsnipError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Can't read {path} as UTF-8 ({reason})")
        self.path = path
