"""Testing support – fakes and property-based generators.

Fixtures are a pytest plugin; import them in your ``conftest.py``::

    pytest_plugins = ["callwire.testing.fixtures"]
"""

from callwire.testing.fakes import RecordingTransport
from callwire.testing.generators import address_strategy, payload_strategy, verb_strategy

__all__ = [
    "RecordingTransport",
    "address_strategy",
    "payload_strategy",
    "verb_strategy",
]
