"""Run commands on the Webby over ssh"""

import logging
import shlex
from typing import Optional

from .git import Git
from .io import Io
from ..exceptions import GitRemoteDoesNotExistError


class RemoteExecutor:
    """Execute shell commands inside the application folder on the Webby"""

    def __init__(self, git: Git, io: Optional[Io] = None):
        self.git = git
        self.io = io or git.io
        self.logger = logging.getLogger("RemoteExecutor")

    def exec(self, command: str) -> str:
        """
        Run a command on the Webby

        The remote part travels to ssh as a single quoted word, so the local
        shell expands nothing in it.
        """
        ip = self.git.remote_ip()
        if not ip:
            raise GitRemoteDoesNotExistError("Could not determine the Webby address from the webbynode remote.")

        remote = f"cd {shlex.quote(self.io.app_name())}; {command}"
        line = f"ssh {self.git.user}@{ip} {shlex.quote(remote)}"
        self.logger.info(f"Running on {ip}: {command}")
        return self.io.exec(line)
