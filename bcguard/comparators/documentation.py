"""PATCH-level edits: descriptions, summaries and parameter examples."""
from ..changes import Change, ChangeSet, Severity
from ..document import Document, Reference
from ..locations import LocationFormatter
from ..walker import PathWalker


def _text_changed(old, new):
    return bool(old) and bool(new) and old != new


class DocumentationComparator:

    def __init__(self, walker: PathWalker, locations: LocationFormatter):
        self.walker = walker
        self.locations = locations

    def detect_documentation_changes(self, old: Document, new: Document, out: ChangeSet):
        if _text_changed(old.info.description, new.info.description):
            out.add(Change('API description changed', Severity.PATCH, 'info.description'))

        for path, method, old_op, new_op in self.walker.iter_matched_operations(old, new):
            label = f'{method.value.upper()} {path}'
            loc = self.locations.format(
                new_op, self.locations.build('paths', path, method.value))
            if _text_changed(old_op.description, new_op.description):
                out.add(Change(f'Operation description changed: {label} (at: {loc})',
                               Severity.PATCH, loc))
            if _text_changed(old_op.summary, new_op.summary):
                out.add(Change(f'Operation summary changed: {label} (at: {loc})',
                               Severity.PATCH, loc))

    def detect_example_changes(self, old: Document, new: Document, out: ChangeSet):
        """Report changed parameter examples.

        Parameters are paired by their position in each list, not by
        (name, in); a pair only counts when both sides carry the same name.
        """
        for path, method, old_op, new_op in self.walker.iter_matched_operations(old, new):
            for old_param, new_param in zip(old_op.parameters, new_op.parameters):
                if isinstance(old_param, Reference) or isinstance(new_param, Reference):
                    continue
                if old_param.name != new_param.name:
                    continue
                if old_param.example is None or new_param.example is None \
                        or old_param.example == new_param.example:
                    continue
                loc = self.locations.format(
                    new_param,
                    self.locations.build('paths', path, method.value, 'parameters'))
                out.add(Change(
                    f'Parameter example changed: {method.value.upper()} {path} -> '
                    f'{old_param.name} (at: {loc})',
                    Severity.PATCH, loc))
