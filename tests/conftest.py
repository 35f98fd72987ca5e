"""Pytest configuration and fixtures for webbynode tests."""

from io import StringIO
from pathlib import Path
from typing import Dict, List, Optional

import pytest
from rich.console import Console

from webbynode.commands import CommandContext
from webbynode.core import Git, Io, Settings


class FakeIo(Io):
    """Io rooted in a temporary directory that never runs real commands.

    Shell output is looked up by exact command line in ``responses``;
    every command is recorded in ``commands``.
    """

    def __init__(self, root: Path, responses: Optional[Dict[str, str]] = None):
        super().__init__(root)
        self.responses: Dict[str, str] = dict(responses or {})
        self.commands: List[str] = []
        self.programs: List[str] = []

    def exec(self, command: str) -> str:
        self.commands.append(command)
        return self.responses.get(command, "")

    def exec_in_path(self, program: str) -> bool:
        return program in self.programs


SAMPLE_CONFIG = """[core]
\trepositoryformatversion = 0
\tfilemode = true
\tbare = false
[remote "origin"]
\turl = git@github.com:webbynode/sample.git
\tfetch = +refs/heads/*:refs/remotes/origin/*
[remote "webbynode"]
\turl = git@1.2.3.4:sample
\tfetch = +refs/heads/*:refs/remotes/webbynode/*
"""


@pytest.fixture
def fake_io(tmp_path):
    """Fake Io rooted at a temporary app directory."""
    app_dir = tmp_path / "sample"
    app_dir.mkdir()
    return FakeIo(app_dir)


@pytest.fixture
def initialized_io(fake_io):
    """Fake Io for a fully initialized application."""
    (fake_io.root / ".git").mkdir()
    (fake_io.root / ".git" / "config").write_text(SAMPLE_CONFIG)
    (fake_io.root / ".webbynode").mkdir()
    (fake_io.root / ".pushand").write_text("#! /bin/bash\nphd $0 sample\n")
    fake_io.responses["git remote"] = "origin\nwebbynode\n"
    return fake_io


@pytest.fixture
def settings():
    return Settings(testing=True)


@pytest.fixture
def output():
    return StringIO()


@pytest.fixture
def make_context(settings, output):
    """Build a CommandContext around a fake Io."""
    def factory(io: FakeIo) -> CommandContext:
        console = Console(file=output, width=200, highlight=False)
        return CommandContext(io=io, settings=settings, git=Git(io), console=console)

    return factory
