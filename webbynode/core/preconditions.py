"""Checks run before commands that need an initialized deployment"""

import logging
from typing import Optional

from .git import Git
from .io import Io
from .pushand import Pushand
from ..constants import MARKER_DIR, MSG_NO_GIT_REPO, MSG_NO_PUSHAND, MSG_NO_REMOTE
from ..exceptions import GitNotRepoError, GitRemoteDoesNotExistError, PushAndFileNotFound


class PreconditionChecker:
    """Verify the working directory is ready for deployment

    Checks run strictly in order and the first failure is raised:

    1. a git repository is present
    2. the webbynode remote is configured
    3. the .webbynode marker directory exists (missing is only logged)
    4. the .pushand descriptor exists
    """

    def __init__(self, git: Git, io: Optional[Io] = None, pushand: Optional[Pushand] = None):
        self.git = git
        self.io = io or git.io
        self.pushand = pushand or Pushand(self.io)
        self.logger = logging.getLogger("PreconditionChecker")

    def check(self) -> None:
        self.check_git_repository()
        self.check_remote()
        self.check_marker_directory()
        self.check_pushand()
        self.logger.debug("All preconditions passed")

    def check_git_repository(self) -> None:
        if not self.git.present():
            raise GitNotRepoError(MSG_NO_GIT_REPO)

    def check_remote(self) -> None:
        if not self.git.remote_is_configured():
            raise GitRemoteDoesNotExistError(MSG_NO_REMOTE)

    def check_marker_directory(self) -> bool:
        if self.io.directory(MARKER_DIR):
            return True
        self.logger.warning(f"{MARKER_DIR} directory not found, continuing")
        return False

    def check_pushand(self) -> None:
        if not self.pushand.present():
            raise PushAndFileNotFound(MSG_NO_PUSHAND)
