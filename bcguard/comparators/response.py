"""Status codes removed from or added to an operation."""
from ..changes import Change, ChangeSet, Severity
from ..document import HttpMethod, Operation
from ..locations import LocationFormatter


class ResponseComparator:
    """Compares the set of status codes only; bodies are not inspected."""

    def __init__(self, locations: LocationFormatter):
        self.locations = locations

    def _where(self, response, path, method, status):
        return self.locations.format(
            response,
            self.locations.build('paths', path, method.value, 'responses', status))

    def detect_removed_responses(self, old: Operation, new: Operation, path: str,
                                 method: HttpMethod, out: ChangeSet):
        for status, response in old.responses.items():
            if status in new.responses:
                continue
            loc = self._where(response, path, method, status)
            out.add(Change(
                f'Response removed: {method.value.upper()} {path} -> {status} (at: {loc})',
                Severity.MAJOR, loc))

    def detect_new_responses(self, old: Operation, new: Operation, path: str,
                             method: HttpMethod, out: ChangeSet):
        for status, response in new.responses.items():
            if status in old.responses:
                continue
            loc = self._where(response, path, method, status)
            out.add(Change(
                f'New response code added: {method.value.upper()} {path} -> {status} '
                f'(at: {loc})',
                Severity.MINOR, loc))
