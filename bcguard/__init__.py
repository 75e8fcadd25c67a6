"""bcguard: classify OpenAPI changes as MAJOR, MINOR or PATCH."""
from .changes import Change, ChangeSet, Severity
from .comparator import ApiComparator, build_comparator, compare, has_breaking
from .errors import BcGuardError, SpecParseError
from .loader import load_document, load_file

__all__ = [
    'ApiComparator',
    'BcGuardError',
    'Change',
    'ChangeSet',
    'Severity',
    'SpecParseError',
    'build_comparator',
    'compare',
    'has_breaking',
    'load_document',
    'load_file',
]

__version__ = '0.1.0'
