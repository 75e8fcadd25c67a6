"""Parameter additions, removals and required-ness, matched by (name, in)."""
from typing import Dict, Tuple

from ..changes import Change, ChangeSet, Severity
from ..document import HttpMethod, Operation, Parameter, Reference
from ..locations import LocationFormatter


def _inline(operation: Operation) -> Dict[Tuple[str, str], Parameter]:
    """Concrete parameters keyed by identity; references are dropped."""
    found = {}
    for param in operation.parameters:
        if isinstance(param, Reference):
            continue
        found.setdefault((param.name, param.location), param)
    return found


class ParameterComparator:

    def __init__(self, locations: LocationFormatter):
        self.locations = locations

    def _where(self, param, path, method):
        return self.locations.format(
            param, self.locations.build('paths', path, method.value, 'parameters'))

    def detect_parameter_breaks(self, old: Operation, new: Operation, path: str,
                                method: HttpMethod, out: ChangeSet):
        new_params = _inline(new)
        for key, old_param in _inline(old).items():
            label = f'{method.value.upper()} {path} -> {old_param.name} ({old_param.location})'
            new_param = new_params.get(key)
            if new_param is None:
                # dropping an optional parameter is compatible
                if old_param.required:
                    loc = self._where(old_param, path, method)
                    out.add(Change(f'Required parameter removed: {label} (at: {loc})',
                                   Severity.MAJOR, loc))
            elif not old_param.required and new_param.required:
                loc = self._where(new_param, path, method)
                out.add(Change(f'Parameter became required: {label} (at: {loc})',
                               Severity.MAJOR, loc))

    def detect_new_parameters(self, old: Operation, new: Operation, path: str,
                              method: HttpMethod, out: ChangeSet):
        old_params = _inline(old)
        for key, new_param in _inline(new).items():
            # new required parameters are not reported at any severity
            if key in old_params or new_param.required:
                continue
            loc = self._where(new_param, path, method)
            out.add(Change(
                f'New optional parameter added: {method.value.upper()} {path} -> '
                f'{new_param.name} ({new_param.location}) (at: {loc})',
                Severity.MINOR, loc))
