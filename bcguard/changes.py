"""Change records and the three-bucket change set."""
from enum import Enum
from typing import Dict, List


class Severity(str, Enum):
    MAJOR = 'major'
    MINOR = 'minor'
    PATCH = 'patch'


class Change:
    """One detected difference: human message, severity and dotted location."""

    __slots__ = ('message', 'severity', 'location')

    def __init__(self, message: str, severity: Severity, location: str):
        self.message = message
        self.severity = severity
        self.location = location

    def __str__(self):
        return self.message

    def __repr__(self):
        return f'Change({self.message!r}, {self.severity.value}, {self.location!r})'

    def __eq__(self, other):
        if not isinstance(other, Change):
            return NotImplemented
        return (self.message, self.severity, self.location) == \
            (other.message, other.severity, other.location)

    def __hash__(self):
        return hash((self.message, self.severity, self.location))


class ChangeSet:
    """Changes bucketed by severity, each bucket in insertion order."""

    def __init__(self):
        self._buckets: Dict[Severity, List[Change]] = {s: [] for s in Severity}

    def add(self, change: Change):
        self._buckets[change.severity].append(change)

    def add_major(self, change: Change):
        self._buckets[Severity.MAJOR].append(change)

    def add_minor(self, change: Change):
        self._buckets[Severity.MINOR].append(change)

    def add_patch(self, change: Change):
        self._buckets[Severity.PATCH].append(change)

    def merge(self, other: 'ChangeSet'):
        for severity in Severity:
            self._buckets[severity].extend(other._buckets[severity])

    @property
    def major(self) -> List[Change]:
        return list(self._buckets[Severity.MAJOR])

    @property
    def minor(self) -> List[Change]:
        return list(self._buckets[Severity.MINOR])

    @property
    def patch(self) -> List[Change]:
        return list(self._buckets[Severity.PATCH])

    def to_dict(self) -> Dict[str, List[str]]:
        return {s.value: [c.message for c in self._buckets[s]] for s in Severity}

    def is_empty(self):
        return not any(self._buckets.values())

    def has_major(self):
        return bool(self._buckets[Severity.MAJOR])

    def has_minor(self):
        return bool(self._buckets[Severity.MINOR])

    def has_patch(self):
        return bool(self._buckets[Severity.PATCH])

    def __len__(self):
        return sum(len(b) for b in self._buckets.values())
