"""bcguard exceptions."""


class BcGuardError(Exception):
    """Base error for everything bcguard reports to the user."""


class SpecParseError(BcGuardError):
    """Raw text could not be turned into an API document."""

    @classmethod
    def from_cause(cls, cause):
        return cls(f'Failed to parse OpenAPI spec: {cause}')


class RevisionNotFoundError(BcGuardError):

    @classmethod
    def invalid_commit(cls, commit_id):
        return cls(f'Invalid commit ID: {commit_id}')


class GitFileError(BcGuardError):

    @classmethod
    def failed_to_get_file(cls, file_path, commit_id, error_output):
        return cls(f'Failed to get file "{file_path}" from commit '
                   f'"{commit_id}": {error_output}')

    @classmethod
    def failed_to_list_files(cls, commit_id, error_output):
        return cls(f'Failed to list files in commit "{commit_id}": {error_output}')
