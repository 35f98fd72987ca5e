"""Collaborators shared by commands"""

from typing import Optional

from rich.console import Console

from ..core import Git, Io, Notifier, Pushand, PreconditionChecker, RemoteExecutor, Settings, load_settings


class CommandContext:
    """Services available to a running command, created lazily

    Anything passed to the constructor is used as is; everything else is
    built on first access from the settings and the shared ``Io``.
    """

    def __init__(self,
                 io: Optional[Io] = None,
                 settings: Optional[Settings] = None,
                 git: Optional[Git] = None,
                 pushand: Optional[Pushand] = None,
                 remote_executor: Optional[RemoteExecutor] = None,
                 notifier: Optional[Notifier] = None,
                 preconditions: Optional[PreconditionChecker] = None,
                 console: Optional[Console] = None):
        self._io = io
        self._settings = settings
        self._git = git
        self._pushand = pushand
        self._remote_executor = remote_executor
        self._notifier = notifier
        self._preconditions = preconditions
        self.console = console or Console(highlight=False)

    @property
    def io(self) -> Io:
        if self._io is None:
            self._io = Io()
        return self._io

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = load_settings()
        return self._settings

    @property
    def git(self) -> Git:
        if self._git is None:
            self._git = Git(self.io, user=self.settings.git_user)
        return self._git

    @property
    def pushand(self) -> Pushand:
        if self._pushand is None:
            self._pushand = Pushand(self.io)
        return self._pushand

    @property
    def remote_executor(self) -> RemoteExecutor:
        if self._remote_executor is None:
            self._remote_executor = RemoteExecutor(self.git, self.io)
        return self._remote_executor

    @property
    def notifier(self) -> Notifier:
        if self._notifier is None:
            self._notifier = Notifier(
                self.io,
                helper=self.settings.notify_helper,
                enabled=self.settings.notifications,
                testing=self.settings.testing,
                image=self.settings.notify_image
            )
        return self._notifier

    @property
    def preconditions(self) -> PreconditionChecker:
        if self._preconditions is None:
            self._preconditions = PreconditionChecker(self.git, self.io, self.pushand)
        return self._preconditions
