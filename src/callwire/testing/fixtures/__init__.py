"""Testing fixtures – pytest fixtures for callwire.

Enable in ``conftest.py``::

    pytest_plugins = ["callwire.testing.fixtures"]
"""
from callwire.testing.fixtures.correlation import TEST_REQUEST_ID, correlation_fixture, fixed_request_id

__all__ = ["TEST_REQUEST_ID", "correlation_fixture", "fixed_request_id"]
