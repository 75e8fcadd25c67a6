"""Per-concern comparators. Each appends into a caller-owned ChangeSet."""
from .documentation import DocumentationComparator
from .endpoint import EndpointComparator
from .parameter import ParameterComparator
from .request_body import RequestBodyComparator
from .response import ResponseComparator
from .schema import SchemaComparator

__all__ = [
    'DocumentationComparator',
    'EndpointComparator',
    'ParameterComparator',
    'RequestBodyComparator',
    'ResponseComparator',
    'SchemaComparator',
]
