"""Pytest configuration and test categorization.

We keep a flat `tests/` layout, but categorize tests into `unit`,
`regression`, and `e2e` via markers so CI can run targeted subsets.
"""

from __future__ import annotations

import pathlib

import pytest


def pytest_configure(config: pytest.Config) -> None:
    for name, doc in (
        ("unit", "fast isolated tests"),
        ("regression", "guards against previously fixed defects"),
        ("e2e", "full CLI sessions across simulated restarts"),
    ):
        config.addinivalue_line("markers", f"{name}: {doc}")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Auto-apply test category markers based on filename conventions."""
    for item in items:
        path = pathlib.Path(str(item.fspath))
        name = path.name.lower()

        if "e2e" in name or "end_to_end" in name:
            item.add_marker(pytest.mark.e2e)
            continue

        if "regression" in name:
            item.add_marker(pytest.mark.regression)
            continue

        item.add_marker(pytest.mark.unit)
