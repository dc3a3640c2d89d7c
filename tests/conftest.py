"""Pytest configuration and shared fixtures for htmlprune tests."""

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Pure logic tests with no I/O")
    config.addinivalue_line("markers", "integration: Tests that touch the filesystem or run the CLI")
    config.addinivalue_line("markers", "e2e: Tests that run the installed htmlprune module in a subprocess")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """
    Apply default markers to tests without explicit markers.

    Unmarked tests default to unit.
    """
    for item in items:
        marker_names = [m.name for m in item.iter_markers()]
        if any(m in marker_names for m in ("unit", "integration", "e2e")):
            continue

        item.add_marker(pytest.mark.unit)


@pytest.fixture
def article_html() -> str:
    """A small page fragment with navigation, ads and content."""
    return (
        '<nav id="menu"><a href="/">Home</a></nav>'
        '<div class="ad-banner">Buy now</div>'
        '<article class="post featured"><h1>Title</h1>'
        '<p>Body text</p><div class="ad-inline">Sponsored</div></article>'
        "<footer>Footer</footer>"
    )
