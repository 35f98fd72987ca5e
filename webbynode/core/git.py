"""Local git repository operations"""

import logging
from typing import Callable, Optional

from . import config_store
from .config_store import ConfigTree
from .io import Io
from ..constants import (
    DEFAULT_GIT_USER,
    GIT_CONFIG_FILE,
    GIT_DIR,
    GIT_INIT_SUCCESS_PATTERN,
    GIT_NOT_REPO_PATTERN,
    GIT_REMOTE_EXISTS_PATTERN,
    REMOTE_NAME,
    REMOTE_URL_PATTERN,
)
from ..exceptions import (
    GitError,
    GitNotRepoError,
    GitRemoteAlreadyExistsError,
    GitRemoteDoesNotExistError,
)


class Git:
    """Inspect and drive the git repository in the working directory

    Each operation shells out through ``Io.exec`` and interprets the raw
    output. Output saying the directory is not a repository always raises
    ``GitNotRepoError``; otherwise an operation succeeds when its output is
    empty, unless it supplies its own success check.
    """

    def __init__(self, io: Optional[Io] = None, user: str = DEFAULT_GIT_USER):
        self.io = io or Io()
        self.user = user
        self.logger = logging.getLogger("Git")
        self._config: Optional[ConfigTree] = None
        self._remote_ip: Optional[str] = None

    def present(self) -> bool:
        return self.io.directory(GIT_DIR)

    def init(self) -> bool:
        return self._exec(
            "git init",
            lambda output: GIT_INIT_SUCCESS_PATTERN.search(output) is not None
        )

    def add(self, what: str) -> bool:
        return self._exec(f"git add {what}")

    def add_remote(self, name: str, host: str, repo: str) -> bool:
        def check(output: str) -> bool:
            if GIT_REMOTE_EXISTS_PATTERN.search(output):
                raise GitRemoteAlreadyExistsError(output)
            return not output

        return self._exec(f"git remote add {name} {self.user}@{host}:{repo}", check)

    def commit(self, message: str) -> bool:
        message = message.replace('"', '\\"')
        return self._exec(f'git commit -q -m "{message}"')

    def remote_is_configured(self) -> bool:
        output = self.io.exec("git remote") or ""
        self._handle_output(output, lambda _: True)
        return REMOTE_NAME in output.split()

    def parse_config(self) -> ConfigTree:
        """
        Parse .git/config, once per instance

        Raises:
            GitNotRepoError: If there is no repository
            GitRemoteDoesNotExistError: If the webbynode remote is missing
        """
        if self._config is not None:
            return self._config

        if not self.present():
            raise GitNotRepoError("Git repository does not exist.")
        if not self.remote_is_configured():
            raise GitRemoteDoesNotExistError("Webbynode has not been initialized.")

        self._config = config_store.load(self.io.root / GIT_CONFIG_FILE)
        return self._config

    def remote_ip(self) -> Optional[str]:
        """Host part of the webbynode remote url"""
        if self._remote_ip is None:
            url = self.parse_config().get("remote", {}).get(REMOTE_NAME, {}).get("url", "")
            match = REMOTE_URL_PATTERN.match(url)
            if match:
                self._remote_ip = match.group(2)
        return self._remote_ip

    def invalidate(self) -> None:
        """Forget the parsed config so the next call re-reads it"""
        self._config = None
        self._remote_ip = None

    def _exec(self, command: str, success: Optional[Callable[[str], bool]] = None) -> bool:
        output = self.io.exec(command) or ""
        self.logger.debug(f"{command}: {output.strip()}")
        return self._handle_output(output, success)

    def _handle_output(self, output: str, success: Optional[Callable[[str], bool]]) -> bool:
        if GIT_NOT_REPO_PATTERN.search(output):
            raise GitNotRepoError(output)

        if success is not None:
            if not success(output):
                raise GitError(output)
        elif output:
            raise GitError(output)

        return True
