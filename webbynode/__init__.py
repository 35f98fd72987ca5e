"""Webbynode - push-to-deploy client for Webbynode hosting.

Wraps a local git repository and a named ``webbynode`` remote so an
application can be initialized, pushed and managed with the ``wn`` command.
"""

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Core
from .core import Git, Io, Notifier, PreconditionChecker, Pushand, RemoteExecutor, Settings, load_settings
from .core.config_store import parse as parse_git_config

# Commands
from .commands import (
    Command,
    CommandContext,
    CommandExecutor,
    CommandRegistry,
    CommandSpec,
    OptionDef,
    ParameterDef,
    register,
    registry,
)

# Exceptions
from .exceptions import (
    WebbynodeError,
    GitError,
    GitNotRepoError,
    GitRemoteDoesNotExistError,
    GitRemoteAlreadyExistsError,
    PushAndFileNotFound,
    ConfigParseError,
    SettingsError,
    CommandNotFoundError,
    MissingParameterError,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Core
    "Git",
    "Io",
    "Notifier",
    "PreconditionChecker",
    "Pushand",
    "RemoteExecutor",
    "Settings",
    "load_settings",
    "parse_git_config",

    # Commands
    "Command",
    "CommandContext",
    "CommandExecutor",
    "CommandRegistry",
    "CommandSpec",
    "OptionDef",
    "ParameterDef",
    "register",
    "registry",

    # Exceptions
    "WebbynodeError",
    "GitError",
    "GitNotRepoError",
    "GitRemoteDoesNotExistError",
    "GitRemoteAlreadyExistsError",
    "PushAndFileNotFound",
    "ConfigParseError",
    "SettingsError",
    "CommandNotFoundError",
    "MissingParameterError",
]
