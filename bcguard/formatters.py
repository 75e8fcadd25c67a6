"""bcguard output formatters for CI/CD integration.

Exports GitHubFormatter, MarkdownFormatter, JSONFormatter with a common
format(changes) -> str interface over a ChangeSet.
"""
import json
import os
from typing import Optional

from .changes import ChangeSet, Severity

BUMP_HINTS = {
    'major': ('MAJOR version bump required (X.0.0)',
              'Breaking changes detected that are incompatible with previous versions.',
              'Example: 1.2.3 -> 2.0.0'),
    'minor': ('MINOR version bump recommended (x.Y.0)',
              'New backward-compatible functionality added.',
              'Example: 1.2.3 -> 1.3.0'),
    'patch': ('PATCH version bump recommended (x.y.Z)',
              'Only documentation or metadata changes detected.',
              'Example: 1.2.3 -> 1.2.4'),
}

TITLES = {
    Severity.MAJOR: 'MAJOR - Breaking Changes',
    Severity.MINOR: 'MINOR - Backward Compatible Additions',
    Severity.PATCH: 'PATCH - Documentation/Metadata Changes',
}

EMOJI = {Severity.MAJOR: '\U0001f534', Severity.MINOR: '\U0001f7e2',
         Severity.PATCH: '\u26aa'}

GITHUB_LEVEL = {Severity.MAJOR: 'error', Severity.MINOR: 'notice',
                Severity.PATCH: 'notice'}


def recommend_bump(changes: ChangeSet) -> Optional[str]:
    """Highest non-empty bucket, or None when nothing changed."""
    if changes.has_major():
        return 'major'
    if changes.has_minor():
        return 'minor'
    if changes.has_patch():
        return 'patch'
    return None


def _bucket(changes: ChangeSet, severity: Severity):
    return getattr(changes, severity.value)


def _count(changes: ChangeSet):
    return {s.value: len(_bucket(changes, s)) for s in Severity}


class GitHubFormatter:
    """Format changes as GitHub Actions workflow annotations.

    Breaking changes become ::error lines, the rest ::notice lines.
    """

    def format(self, changes: ChangeSet) -> str:
        if changes.is_empty():
            return '::notice ::No changes detected'
        lines = []
        for severity in Severity:
            level = GITHUB_LEVEL[severity]
            for change in _bucket(changes, severity):
                lines.append(f'::{level} title={severity.value.upper()}::{change.message}')
        c = _count(changes)
        summary_level = 'error' if changes.has_major() else 'notice'
        lines.append(f'::{summary_level} ::Summary: {c["major"]} major, '
                     f'{c["minor"]} minor, {c["patch"]} patch')
        return '\n'.join(lines)


class MarkdownFormatter:
    """Format changes as a Markdown report suitable for PR comments."""

    def format(self, changes: ChangeSet) -> str:
        c = _count(changes)
        lines = [
            '# bcguard Report',
            '',
            '## Summary',
            '',
            '| Category | Count |',
            '|----------|-------|',
            f'| {EMOJI[Severity.MAJOR]} Major | {c["major"]} |',
            f'| {EMOJI[Severity.MINOR]} Minor | {c["minor"]} |',
            f'| {EMOJI[Severity.PATCH]} Patch | {c["patch"]} |',
            '',
        ]
        if changes.is_empty():
            lines.append('\u2705 No changes detected.')
            lines.append('')
            return '\n'.join(lines)
        for severity in Severity:
            bucket = _bucket(changes, severity)
            if not bucket:
                continue
            lines.append(f'## {TITLES[severity]} ({len(bucket)})')
            lines.append('')
            for change in bucket:
                lines.append(f'- {EMOJI[severity]} {change.message}')
            lines.append('')
        headline, reason, example = BUMP_HINTS[recommend_bump(changes)]
        lines += ['## Version Bump Recommendation', '', f'**{headline}**', '',
                  reason, example, '']
        return '\n'.join(lines)


class JSONFormatter:
    """Format changes as machine-readable JSON.

    Output structure:
    {
        "summary": {"major": N, "minor": N, "patch": N},
        "changes": {"major": [...], "minor": [...], "patch": [...]},
        "recommendation": "major" | "minor" | "patch" | null
    }
    """

    def format(self, changes: ChangeSet) -> str:
        result = {
            'summary': _count(changes),
            'changes': changes.to_dict(),
            'recommendation': recommend_bump(changes),
        }
        return json.dumps(result, indent=2)


def get_formatter(fmt: str):
    """Return a formatter instance by name.

    Returns None for 'rich' (caller should use default Rich output).
    For 'auto', detects GITHUB_ACTIONS env var.
    """
    if fmt == 'auto':
        if os.environ.get('GITHUB_ACTIONS') == 'true':
            return GitHubFormatter()
        return None
    _map = {
        'github': GitHubFormatter,
        'markdown': MarkdownFormatter,
        'json': JSONFormatter,
        'rich': None,
    }
    cls = _map.get(fmt)
    return cls() if cls else None
