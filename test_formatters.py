"""Tests for bcguard output formatters.

Covers GitHubFormatter, MarkdownFormatter, JSONFormatter, bump
recommendation and auto-detection logic for CI environments.
"""
import json

import pytest

from bcguard.changes import Change, ChangeSet, Severity
from bcguard.formatters import (
    GitHubFormatter,
    JSONFormatter,
    MarkdownFormatter,
    get_formatter,
    recommend_bump,
)


def _changeset(*entries):
    changes = ChangeSet()
    for message, severity in entries:
        changes.add(Change(message, severity, 'loc'))
    return changes


@pytest.fixture
def sample():
    return _changeset(
        ('Endpoint removed: /orders (at: paths./orders)', Severity.MAJOR),
        ('Property type changed in schema: Order.amount (integer -> string) '
         '(at: components.schemas.Order.properties.amount)', Severity.MAJOR),
        ('New endpoint added: /webhooks (at: paths./webhooks)', Severity.MINOR),
        ('Operation summary changed: GET /users (at: paths./users.get)', Severity.PATCH),
    )


@pytest.fixture
def empty():
    return ChangeSet()


# ── recommend_bump ───────────────────────────────────────────────────────────

class TestRecommendBump:

    def test_major_wins(self, sample):
        assert recommend_bump(sample) == 'major'

    def test_minor_without_major(self):
        assert recommend_bump(_changeset(('x', Severity.MINOR), ('y', Severity.PATCH))) == 'minor'

    def test_patch_only(self):
        assert recommend_bump(_changeset(('y', Severity.PATCH))) == 'patch'

    def test_nothing(self, empty):
        assert recommend_bump(empty) is None


# ── GitHubFormatter ──────────────────────────────────────────────────────────

class TestGitHubFormatter:
    """GitHub Actions annotation output."""

    def test_major_emits_error_annotation(self, sample):
        lines = GitHubFormatter().format(sample).splitlines()
        error_lines = [l for l in lines if l.startswith('::error ')]
        assert len(error_lines) == 3  # 2 major + summary
        assert error_lines[0] == '::error title=MAJOR::Endpoint removed: /orders (at: paths./orders)'

    def test_minor_and_patch_emit_notices(self, sample):
        result = GitHubFormatter().format(sample)
        assert '::notice title=MINOR::New endpoint added: /webhooks' in result
        assert '::notice title=PATCH::Operation summary changed: GET /users' in result

    def test_summary_line_counts(self, sample):
        last = GitHubFormatter().format(sample).splitlines()[-1]
        assert last == '::error ::Summary: 2 major, 1 minor, 1 patch'

    def test_summary_is_notice_without_major(self):
        result = GitHubFormatter().format(_changeset(('x', Severity.MINOR)))
        assert result.splitlines()[-1].startswith('::notice ::Summary')

    def test_empty_changes_returns_notice(self, empty):
        result = GitHubFormatter().format(empty)
        assert result.startswith('::notice')
        assert 'No changes' in result


# ── MarkdownFormatter ────────────────────────────────────────────────────────

class TestMarkdownFormatter:
    """Markdown PR comment output."""

    def test_report_header(self, sample):
        result = MarkdownFormatter().format(sample)
        assert result.startswith('# bcguard Report')

    def test_summary_table_counts(self, sample):
        result = MarkdownFormatter().format(sample)
        assert '| \U0001f534 Major | 2 |' in result
        assert '| \U0001f7e2 Minor | 1 |' in result
        assert '| \u26aa Patch | 1 |' in result

    def test_sections_per_bucket(self, sample):
        result = MarkdownFormatter().format(sample)
        assert '## MAJOR - Breaking Changes (2)' in result
        assert '## MINOR - Backward Compatible Additions (1)' in result
        assert '## PATCH - Documentation/Metadata Changes (1)' in result
        assert result.index('## MAJOR') < result.index('## MINOR') < result.index('## PATCH')

    def test_bump_recommendation(self, sample):
        result = MarkdownFormatter().format(sample)
        assert '**MAJOR version bump required (X.0.0)**' in result

    def test_empty_bucket_has_no_section(self):
        result = MarkdownFormatter().format(_changeset(('Doc edit', Severity.PATCH)))
        assert '## MAJOR' not in result
        assert '**PATCH version bump recommended (x.y.Z)**' in result

    def test_empty_changes_no_details(self, empty):
        result = MarkdownFormatter().format(empty)
        assert '## MAJOR' not in result
        assert 'Version Bump' not in result
        assert 'No changes detected' in result


# ── JSONFormatter ────────────────────────────────────────────────────────────

class TestJSONFormatter:
    """Machine-readable JSON output."""

    def test_valid_json_output(self, sample):
        data = json.loads(JSONFormatter().format(sample))
        assert set(data) == {'summary', 'changes', 'recommendation'}

    def test_summary_counts_correct(self, sample):
        data = json.loads(JSONFormatter().format(sample))
        assert data['summary'] == {'major': 2, 'minor': 1, 'patch': 1}

    def test_changes_are_three_buckets_in_order(self, sample):
        data = json.loads(JSONFormatter().format(sample))
        assert data['changes'] == sample.to_dict()
        assert data['changes']['major'][0].startswith('Endpoint removed: /orders')

    def test_recommendation(self, sample):
        assert json.loads(JSONFormatter().format(sample))['recommendation'] == 'major'

    def test_empty_changes_valid_json(self, empty):
        data = json.loads(JSONFormatter().format(empty))
        assert data['summary'] == {'major': 0, 'minor': 0, 'patch': 0}
        assert data['changes'] == {'major': [], 'minor': [], 'patch': []}
        assert data['recommendation'] is None


# ── get_formatter / auto-detection ───────────────────────────────────────────

class TestGetFormatter:
    """Factory function and GITHUB_ACTIONS auto-detection."""

    def test_auto_github_env_returns_github_formatter(self, monkeypatch):
        monkeypatch.setenv('GITHUB_ACTIONS', 'true')
        assert isinstance(get_formatter('auto'), GitHubFormatter)

    def test_auto_no_env_returns_none(self, monkeypatch):
        monkeypatch.delenv('GITHUB_ACTIONS', raising=False)
        assert get_formatter('auto') is None  # caller uses Rich

    def test_auto_github_false_returns_none(self, monkeypatch):
        monkeypatch.setenv('GITHUB_ACTIONS', 'false')
        assert get_formatter('auto') is None

    @pytest.mark.parametrize('name, cls', [
        ('github', GitHubFormatter),
        ('markdown', MarkdownFormatter),
        ('json', JSONFormatter),
    ])
    def test_explicit(self, name, cls):
        assert isinstance(get_formatter(name), cls)

    def test_explicit_rich_returns_none(self):
        assert get_formatter('rich') is None
