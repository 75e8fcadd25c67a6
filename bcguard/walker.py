"""Read-only traversal of paths and operations."""
from typing import Iterator, Tuple

from .document import Document, HttpMethod, Operation, PathItem


class PathWalker:

    def iter_paths(self, doc: Document) -> Iterator[Tuple[str, PathItem]]:
        """Yield ``(path, item)`` in document order."""
        for path, item in doc.paths.items():
            yield path, item

    def iter_operations(self, item: PathItem) -> Iterator[Tuple[HttpMethod, Operation]]:
        """Yield present operations in :class:`HttpMethod` declaration order."""
        for method in HttpMethod:
            operation = item.operation(method)
            if operation is not None:
                yield method, operation

    def iter_path_operations(self, doc: Document):
        """Yield ``(path, method, operation, item)`` for the whole document."""
        for path, item in self.iter_paths(doc):
            for method, operation in self.iter_operations(item):
                yield path, method, operation, item

    def iter_matched_operations(self, old: Document, new: Document):
        """Yield ``(path, method, old_op, new_op)`` for operations on both sides.

        Follows the old document's path and method order.
        """
        for path, method, old_op, _ in self.iter_path_operations(old):
            new_item = new.paths.get(path)
            new_op = new_item.operation(method) if new_item is not None else None
            if new_op is not None:
                yield path, method, old_op, new_op
