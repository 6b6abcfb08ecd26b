"""
================================================================================
Root Pytest Configuration
================================================================================

Registers the project-wide markers and initializes logging once per session.

================================================================================
"""

import pytest

from pagewire.common.global_config import init_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests against a running application"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "unit: Browser-free unit tests"
    )
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )

    init_logger()


def pytest_collection_modifyitems(config, items):
    """Tag tests with their suite marker based on their location."""
    for item in items:
        if "ui_testing" in item.path.parts:
            item.add_marker(pytest.mark.ui)

        if "unit" in item.path.parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "pagewire - component wiring test suite",
        "=" * 60,
        "",
    ]
