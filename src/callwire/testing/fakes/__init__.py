"""Testing fakes – in-memory doubles for callwire ports."""
from callwire.testing.fakes.transport import RecordingTransport

__all__ = ["RecordingTransport"]
