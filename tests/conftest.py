"""Pytest configuration for tstrace tests."""


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests (isolated component tests)")
    config.addinivalue_line("markers", "integration: integration tests (multi-component tests)")
