"""Removed and added paths and operations."""
from ..changes import Change, ChangeSet, Severity
from ..document import Document
from ..locations import LocationFormatter
from ..walker import PathWalker


class EndpointComparator:

    def __init__(self, walker: PathWalker, locations: LocationFormatter):
        self.walker = walker
        self.locations = locations

    def detect_removed_endpoints(self, old: Document, new: Document, out: ChangeSet):
        for path, item in self.walker.iter_paths(old):
            if path in new.paths:
                continue
            loc = self.locations.format(item, self.locations.build('paths', path))
            out.add(Change(f'Endpoint removed: {path} (at: {loc})',
                           Severity.MAJOR, loc))

    def detect_removed_operations(self, old: Document, new: Document, out: ChangeSet):
        for path, item in self.walker.iter_paths(old):
            new_item = new.paths.get(path)
            if new_item is None:
                continue
            for method, operation in self.walker.iter_operations(item):
                if new_item.operation(method) is not None:
                    continue
                loc = self.locations.format(
                    operation, self.locations.build('paths', path, method.value))
                out.add(Change(
                    f'Operation removed: {method.value.upper()} {path} (at: {loc})',
                    Severity.MAJOR, loc))

    def detect_new_endpoints(self, old: Document, new: Document, out: ChangeSet):
        for path, item in self.walker.iter_paths(new):
            if path in old.paths:
                continue
            loc = self.locations.format(item, self.locations.build('paths', path))
            out.add(Change(f'New endpoint added: {path} (at: {loc})',
                           Severity.MINOR, loc))

    def detect_new_operations(self, old: Document, new: Document, out: ChangeSet):
        for path, item in self.walker.iter_paths(new):
            old_item = old.paths.get(path)
            if old_item is None:
                continue
            for method, operation in self.walker.iter_operations(item):
                if old_item.operation(method) is not None:
                    continue
                loc = self.locations.format(
                    operation, self.locations.build('paths', path, method.value))
                out.add(Change(
                    f'New operation added: {method.value.upper()} {path} (at: {loc})',
                    Severity.MINOR, loc))
