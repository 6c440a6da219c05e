"""
================================================================================
Root Pytest Configuration
================================================================================

Registers markers for the helper test suite.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Test type markers
    config.addinivalue_line(
        "markers", "unit: Fast tests against in-memory browser fakes"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that sleep in real time"
    )

    # Component markers
    config.addinivalue_line(
        "markers", "waits: Tests related to condition polling"
    )
    config.addinivalue_line(
        "markers", "windows: Tests related to window selection"
    )
    config.addinivalue_line(
        "markers", "resolver: Tests related to candidate resolution"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-add the 'unit' marker to tests in the unit directory."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
