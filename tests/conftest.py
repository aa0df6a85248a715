"""Shared fixtures and helpers for tests."""

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


def align(src: str) -> str:
    """Dedent an indented triple-quoted snippet and drop the surrounding blank lines."""
    return textwrap.dedent(src).strip("\n") + "\n"


@pytest.fixture
def write_sql(tmp_path: Path) -> Callable[..., Path]:
    """Return a writer that stores an aligned SQL snippet and returns its path."""

    def _write(src: str, relpath: str = "mock.source.sql") -> Path:
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(align(src), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Return a project root marked with prick.yml."""
    root = tmp_path / "project"
    root.mkdir()
    (root / "prick.yml").write_text("name: project\n", encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SQLSNIP_PROJECT_MARKER", "SQLSNIP_SCHEMA_DIR", "SQLSNIP_PSQL"):
        monkeypatch.delenv(name, raising=False)
