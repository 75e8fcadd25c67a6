"""Request body presence and required-ness."""
from ..changes import Change, ChangeSet, Severity
from ..document import HttpMethod, Operation, Reference
from ..locations import LocationFormatter


class RequestBodyComparator:

    def __init__(self, locations: LocationFormatter):
        self.locations = locations

    def detect_request_body_breaks(self, old: Operation, new: Operation, path: str,
                                   method: HttpMethod, out: ChangeSet):
        old_body, new_body = old.request_body, new.request_body
        if old_body is None or isinstance(old_body, Reference):
            return
        fallback = self.locations.build('paths', path, method.value, 'requestBody')
        label = f'{method.value.upper()} {path}'
        if new_body is None:
            if old_body.required:
                loc = self.locations.format(old_body, fallback)
                out.add(Change(f'Required request body removed: {label} (at: {loc})',
                               Severity.MAJOR, loc))
            return
        if isinstance(new_body, Reference):
            return
        if not old_body.required and new_body.required:
            loc = self.locations.format(new_body, fallback)
            out.add(Change(f'Request body became required: {label} (at: {loc})',
                           Severity.MAJOR, loc))
