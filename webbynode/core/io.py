"""Process and filesystem access"""

import logging
import os
import shutil
import stat
import subprocess
from pathlib import Path
from typing import Optional


class Io:
    """Thin wrapper around the operating system

    Every shell command and file operation issued by webbynode goes
    through an instance of this class, so tests can substitute a fake.
    """

    def __init__(self, cwd: Optional[Path] = None):
        self.cwd = Path(cwd) if cwd else None
        self.logger = logging.getLogger("Io")

    @property
    def root(self) -> Path:
        return self.cwd or Path.cwd()

    def exec(self, command: str) -> str:
        """
        Run a shell command and capture its output

        Args:
            command: Command line, interpreted by the shell

        Returns:
            Combined stdout and stderr
        """
        self.logger.debug(f"Running: {command}")
        result = subprocess.run(
            command,
            shell=True,
            cwd=self.root,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True
        )
        return result.stdout

    def exec_in_path(self, program: str) -> bool:
        """Check whether a program is available on PATH"""
        return shutil.which(program) is not None

    def directory(self, path: str) -> bool:
        return (self.root / path).is_dir()

    def file_exists(self, path: str) -> bool:
        return (self.root / path).exists()

    def create_file(self, path: str, contents: str) -> None:
        with open(self.root / path, 'w') as f:
            f.write(contents)

    def mkdir(self, path: str) -> None:
        (self.root / path).mkdir(parents=True, exist_ok=True)

    def make_executable(self, path: str) -> None:
        target = self.root / path
        mode = os.stat(target).st_mode
        os.chmod(target, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    def app_name(self) -> str:
        """Application name, taken from the working directory"""
        return self.root.resolve().name
