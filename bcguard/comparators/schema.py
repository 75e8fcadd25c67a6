"""Component schemas and their properties."""
from ..changes import Change, ChangeSet, Severity
from ..document import Document, Reference, Schema
from ..locations import LocationFormatter


class SchemaComparator:
    """Compares ``components.schemas`` by name, then properties by name.

    Schemas or properties given as references are matched by name but their
    contents are never compared.
    """

    def __init__(self, locations: LocationFormatter):
        self.locations = locations

    def _prop_path(self, schema_name, prop):
        return self.locations.build('components', 'schemas', schema_name,
                                    'properties', prop)

    def detect_schema_breaks(self, old: Document, new: Document, out: ChangeSet):
        new_schemas = new.components.schemas
        for name, old_schema in old.components.schemas.items():
            new_schema = new_schemas.get(name)
            if new_schema is None:
                loc = self.locations.format(
                    old_schema, self.locations.build('components', 'schemas', name))
                out.add(Change(f'Schema removed: {name} (at: {loc})',
                               Severity.MAJOR, loc))
                continue
            if isinstance(old_schema, Reference) or isinstance(new_schema, Reference):
                continue
            self.detect_property_breaks(old_schema, new_schema, name, out)

    def detect_property_breaks(self, old: Schema, new: Schema, schema_name: str,
                               out: ChangeSet):
        for prop, old_prop in old.properties.items():
            new_prop = new.properties.get(prop)
            if new_prop is None:
                if prop in old.required:
                    loc = self.locations.format(old_prop,
                                                self._prop_path(schema_name, prop))
                    out.add(Change(
                        f'Required property removed from schema: {schema_name}.{prop} '
                        f'(at: {loc})',
                        Severity.MAJOR, loc))
                continue
            old_type = getattr(old_prop, 'type', None)
            new_type = getattr(new_prop, 'type', None)
            if old_type and new_type and old_type != new_type:
                loc = self.locations.format(new_prop, self._prop_path(schema_name, prop))
                out.add(Change(
                    f'Property type changed in schema: {schema_name}.{prop} '
                    f'({old_type} -> {new_type}) (at: {loc})',
                    Severity.MAJOR, loc))
        # also fires for brand-new properties, which then get no MINOR entry
        for prop in new.required:
            if prop in old.required:
                continue
            loc = self._prop_path(schema_name, prop)
            out.add(Change(
                f'Property became required in schema: {schema_name}.{prop} (at: {loc})',
                Severity.MAJOR, loc))

    def detect_new_schemas(self, old: Document, new: Document, out: ChangeSet):
        for name, new_schema in new.components.schemas.items():
            if name in old.components.schemas:
                continue
            loc = self.locations.format(
                new_schema, self.locations.build('components', 'schemas', name))
            out.add(Change(f'New schema added: {name} (at: {loc})',
                           Severity.MINOR, loc))

    def detect_new_properties(self, old: Document, new: Document, out: ChangeSet):
        for name, new_schema in new.components.schemas.items():
            old_schema = old.components.schemas.get(name)
            if old_schema is None or isinstance(old_schema, Reference) \
                    or isinstance(new_schema, Reference):
                continue
            for prop, new_prop in new_schema.properties.items():
                if prop in old_schema.properties or prop in new_schema.required:
                    continue
                loc = self.locations.format(new_prop, self._prop_path(name, prop))
                out.add(Change(
                    f'New optional property added to schema: {name}.{prop} (at: {loc})',
                    Severity.MINOR, loc))
