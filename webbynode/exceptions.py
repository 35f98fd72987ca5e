"""Exception definitions for webbynode"""

from .constants import ErrorCode


class WebbynodeError(Exception):
    """Base exception for webbynode"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class GitError(WebbynodeError):
    """Git command produced unexpected output

    The raw output is kept on ``output`` for diagnostics.
    """

    def __init__(self, output: str, error_code: str = ErrorCode.GIT_ERROR):
        super().__init__(output, error_code)
        self.output = output


class GitNotRepoError(GitError):
    """No git repository where one was expected"""

    def __init__(self, output: str):
        super().__init__(output, ErrorCode.GIT_NOT_REPO)


class GitRemoteDoesNotExistError(GitError):
    """Repository lacks the webbynode remote"""

    def __init__(self, output: str):
        super().__init__(output, ErrorCode.GIT_REMOTE_MISSING)


class GitRemoteAlreadyExistsError(GitError):
    """Remote name already taken"""

    def __init__(self, output: str):
        super().__init__(output, ErrorCode.GIT_REMOTE_EXISTS)


class PushAndFileNotFound(WebbynodeError):
    """Deployment descriptor missing"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.PUSHAND_NOT_FOUND)


class ConfigParseError(WebbynodeError):
    """Git config file could not be read"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_PARSE_ERROR)


class SettingsError(WebbynodeError):
    """Settings file could not be loaded"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.SETTINGS_ERROR)


class CommandNotFoundError(WebbynodeError):
    """No command registered under the given name"""

    def __init__(self, name: str):
        super().__init__(f"Command not found: {name}", ErrorCode.COMMAND_NOT_FOUND)
        self.name = name


class MissingParameterError(WebbynodeError):
    """Required positional parameter was not supplied"""

    def __init__(self, command: str, parameter: str):
        message = f"Missing required parameter '{parameter}' for command '{command}'"
        super().__init__(message, ErrorCode.MISSING_PARAMETER)
        self.command = command
        self.parameter = parameter
