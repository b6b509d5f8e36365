"""Transport adapter – the seam between descriptors and the wire."""
from callwire.adapters.transport.logged import LoggingTransport
from callwire.adapters.transport.protocol import Transport, dispatch

__all__ = ["LoggingTransport", "Transport", "dispatch"]
