"""Read spec files out of a git repository at given revisions."""
import logging
import re
import subprocess
from pathlib import Path
from typing import List

from .errors import BcGuardError, GitFileError, RevisionNotFoundError, SpecParseError

logger = logging.getLogger(__name__)

SPEC_FILE_RE = re.compile(r'\.(yaml|yml|json)$', re.IGNORECASE)


def _stderr(result) -> str:
    return result.stderr.decode('utf-8', errors='replace').strip()


class GitRepository:

    def __init__(self, path):
        self.path = Path(path)
        if not self.path.is_dir():
            raise BcGuardError(f'Git repository not found: {path}')

    def _git(self, *args):
        # output stays as bytes; blobs are decoded by the caller
        logger.debug('git %s (in %s)', ' '.join(args), self.path)
        try:
            return subprocess.run(['git', *args], cwd=self.path, capture_output=True)
        except FileNotFoundError as e:
            raise BcGuardError('git executable not found') from e

    def validate_revision(self, revision: str):
        if self._git('cat-file', '-t', revision).returncode != 0:
            raise RevisionNotFoundError.invalid_commit(revision)

    def read_file(self, revision: str, file_path: str) -> str:
        result = self._git('show', f'{revision}:{file_path}')
        if result.returncode != 0:
            raise GitFileError.failed_to_get_file(file_path, revision, _stderr(result))
        try:
            return result.stdout.decode('utf-8')
        except UnicodeDecodeError as e:
            raise SpecParseError.from_cause(e) from e

    def find_spec_files(self, revision: str) -> List[str]:
        """Files at ``revision`` that look like JSON or YAML documents."""
        result = self._git('ls-tree', '-r', '--name-only', revision)
        if result.returncode != 0:
            raise GitFileError.failed_to_list_files(revision, _stderr(result))
        names = result.stdout.decode('utf-8', errors='replace')
        return [f for f in names.strip().splitlines() if SPEC_FILE_RE.search(f)]
