"""Request – descriptors for outgoing calls."""
from callwire.request.builder import RequestBuilder
from callwire.request.descriptor import (
    JSON_ACCEPT,
    JSON_CONTENT_TYPE,
    METHOD_OVERRIDE_FIELD,
    REQUEST_ID_HEADER,
    RequestDescriptor,
    build,
    normalize_verb,
)

__all__ = [
    "JSON_ACCEPT",
    "JSON_CONTENT_TYPE",
    "METHOD_OVERRIDE_FIELD",
    "REQUEST_ID_HEADER",
    "RequestBuilder",
    "RequestDescriptor",
    "build",
    "normalize_verb",
]
