"""Pipe generated SQL into the psql client."""

import os
import shutil
import subprocess

_DEFAULT_PSQL = "psql"


def psql_executable() -> str:
    return os.getenv("SQLSNIP_PSQL", _DEFAULT_PSQL)


def psql_available() -> bool:
    return shutil.which(psql_executable()) is not None


def run_psql(database: str, statements: list[str]) -> int:
    """Feed *statements* to ``psql -d database`` on stdin and return its exit code."""
    result = subprocess.run(
        [psql_executable(), "-d", database],
        input="\n".join(statements) + "\n",
        text=True,
        check=False,
    )
    return result.returncode
