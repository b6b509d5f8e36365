"""Testing generators – property-based test data."""
from callwire.testing.generators.strategies import (
    STANDARD_VERBS,
    address_strategy,
    payload_strategy,
    verb_strategy,
)

__all__ = ["STANDARD_VERBS", "address_strategy", "payload_strategy", "verb_strategy"]
