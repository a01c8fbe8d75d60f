"""Global pytest fixtures and default marks for shapekit."""

from __future__ import annotations

from pathlib import Path

import pytest

from shapekit import config as shapekit_config

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = {
    TESTS_ROOT / "unit": "unit",
    TESTS_ROOT / "integration": "integration",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark items with the name of the folder they live in (`unit`, `integration`)."""
    for item in items:
        path = item.path.resolve()
        for folder, marker_name in FOLDER_MARKERS.items():
            if folder in path.parents and not any(
                marker.name == marker_name for marker in item.iter_markers()
            ):
                item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture
def clean_shapekit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear SHAPEKIT_* variables so the runner's environment cannot leak in."""
    for name in (
        shapekit_config.ENCODING_ENV_VAR,
        shapekit_config.READ_FLAG_ENV_VAR,
        shapekit_config.SHELL_ENV_VAR,
    ):
        monkeypatch.delenv(name, raising=False)
