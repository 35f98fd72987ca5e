"""Desktop notifications"""

import logging
import shlex
from typing import Optional

from .io import Io
from ..constants import ANSI_ESCAPE_PATTERN, APP_TITLE, DEFAULT_NOTIFY_HELPER


class Notifier:
    """Best-effort desktop notifications through an external helper"""

    def __init__(self,
                 io: Optional[Io] = None,
                 helper: str = DEFAULT_NOTIFY_HELPER,
                 enabled: bool = True,
                 testing: bool = False,
                 image: Optional[str] = None):
        self.io = io or Io()
        self.helper = helper
        self.enabled = enabled
        self.testing = testing
        self.image = image
        self.logger = logging.getLogger("Notifier")
        self._installed: Optional[bool] = None

    @property
    def installed(self) -> bool:
        if self._installed is None:
            self._installed = self.io.exec_in_path(self.helper)
        return self._installed

    def message(self, message: str) -> bool:
        """
        Show a notification

        Returns:
            True if the helper was invoked
        """
        if not self.enabled or self.testing or not self.installed:
            return False

        message = ANSI_ESCAPE_PATTERN.sub("", message)
        self.logger.debug(f"Notifying: {message}")

        line = f"{self.helper} -t {shlex.quote(APP_TITLE)} -m {shlex.quote(message)}"
        if self.image:
            line += f" --image {shlex.quote(self.image)}"
        self.io.exec(line)
        return True
