"""bcguard: backward-compatibility checking for OpenAPI documents.

:class:`ApiComparator` runs every comparator over two parsed documents in a
fixed order and collects the results into one :class:`ChangeSet`. The order
of entries inside each bucket is stable across runs.
"""
import logging
from typing import Callable

from .changes import ChangeSet
from .comparators import (DocumentationComparator, EndpointComparator,
                          ParameterComparator, RequestBodyComparator,
                          ResponseComparator, SchemaComparator)
from .document import Document
from .locations import LocationFormatter
from .walker import PathWalker

logger = logging.getLogger(__name__)


class ApiComparator:

    def __init__(self, walker: PathWalker, endpoints: EndpointComparator,
                 parameters: ParameterComparator,
                 request_bodies: RequestBodyComparator,
                 responses: ResponseComparator, schemas: SchemaComparator,
                 documentation: DocumentationComparator):
        self.walker = walker
        self.endpoints = endpoints
        self.parameters = parameters
        self.request_bodies = request_bodies
        self.responses = responses
        self.schemas = schemas
        self.documentation = documentation

    def compare(self, old: Document, new: Document) -> ChangeSet:
        changes = ChangeSet()

        # breaking
        self.endpoints.detect_removed_endpoints(old, new, changes)
        self.endpoints.detect_removed_operations(old, new, changes)
        for path, method, old_op, new_op in self.walker.iter_matched_operations(old, new):
            self.parameters.detect_parameter_breaks(old_op, new_op, path, method, changes)
            self.responses.detect_removed_responses(old_op, new_op, path, method, changes)
            self.request_bodies.detect_request_body_breaks(old_op, new_op, path, method,
                                                           changes)
        self.schemas.detect_schema_breaks(old, new, changes)

        # additive
        self.endpoints.detect_new_endpoints(old, new, changes)
        self.endpoints.detect_new_operations(old, new, changes)
        for path, method, old_op, new_op in self.walker.iter_matched_operations(old, new):
            self.parameters.detect_new_parameters(old_op, new_op, path, method, changes)
            self.responses.detect_new_responses(old_op, new_op, path, method, changes)
        self.schemas.detect_new_schemas(old, new, changes)
        self.schemas.detect_new_properties(old, new, changes)

        # documentation
        self.documentation.detect_documentation_changes(old, new, changes)
        self.documentation.detect_example_changes(old, new, changes)

        logger.debug('compared documents: %d major, %d minor, %d patch',
                     len(changes.major), len(changes.minor), len(changes.patch))
        return changes

    def compare_text(self, old_text: str, new_text: str,
                     loader: Callable[[str], Document]) -> ChangeSet:
        """Load both texts with ``loader`` and compare them.

        Loader errors propagate before any comparison runs.
        """
        old = loader(old_text)
        new = loader(new_text)
        return self.compare(old, new)


def build_comparator() -> ApiComparator:
    """Wire an :class:`ApiComparator` with one of each collaborator."""
    walker = PathWalker()
    locations = LocationFormatter()
    return ApiComparator(
        walker=walker,
        endpoints=EndpointComparator(walker, locations),
        parameters=ParameterComparator(locations),
        request_bodies=RequestBodyComparator(locations),
        responses=ResponseComparator(locations),
        schemas=SchemaComparator(locations),
        documentation=DocumentationComparator(walker, locations),
    )


def compare(old: Document, new: Document) -> ChangeSet:
    return build_comparator().compare(old, new)


def has_breaking(changes: ChangeSet) -> bool:
    return changes.has_major()
