"""Core functionality for webbynode"""

from .io import Io
from .config_store import ConfigTree
from .git import Git
from .pushand import Pushand
from .preconditions import PreconditionChecker
from .notify import Notifier
from .remote_executor import RemoteExecutor
from .settings import Settings, load_settings

__all__ = [
    "Io",
    "ConfigTree",
    "Git",
    "Pushand",
    "PreconditionChecker",
    "Notifier",
    "RemoteExecutor",
    "Settings",
    "load_settings",
]
