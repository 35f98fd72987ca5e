"""Deployment descriptor (.pushand) handling"""

import logging
from typing import Optional

from .io import Io
from ..constants import PUSHAND_FILE, PUSHAND_TEMPLATE


class Pushand:
    """The executable .pushand script the Webby runs after each push"""

    def __init__(self, io: Optional[Io] = None):
        self.io = io or Io()
        self.logger = logging.getLogger("Pushand")

    def present(self) -> bool:
        return self.io.file_exists(PUSHAND_FILE)

    def create(self, host: str) -> bool:
        """
        Write the descriptor for host unless one already exists

        Returns:
            True if the file was created
        """
        if self.present():
            self.logger.info(f"{PUSHAND_FILE} already exists, skipping")
            return False

        self.io.create_file(PUSHAND_FILE, PUSHAND_TEMPLATE.format(host=host))
        self.io.make_executable(PUSHAND_FILE)
        return True
