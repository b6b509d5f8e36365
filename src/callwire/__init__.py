"""
callwire – turn a logical call into an HTTP request descriptor.

Import path convention::

    from callwire import build, RequestBuilder
    from callwire.kernel.errors import PathError
    from callwire.observability.correlation import set_request_id_provider
    from callwire.adapters.transport import LoggingTransport, dispatch
"""

from callwire.kernel.errors import PathError
from callwire.observability.correlation import (
    get_request_id_provider,
    reset_request_id_provider,
    set_request_id_provider,
)
from callwire.request import RequestBuilder, RequestDescriptor, build

__version__ = "0.1.0"
__all__ = [
    "PathError",
    "RequestBuilder",
    "RequestDescriptor",
    "__version__",
    "build",
    "get_request_id_provider",
    "reset_request_id_provider",
    "set_request_id_provider",
]
