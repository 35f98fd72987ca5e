"""Tests for running commands on the Webby."""

import os
import sys

import pytest

from webbynode.core import Git, Io, RemoteExecutor
from webbynode.exceptions import GitRemoteDoesNotExistError


class FixedHostGit(Git):
    def __init__(self, io, ip):
        super().__init__(io)
        self.ip = ip

    def remote_ip(self):
        return self.ip


@pytest.fixture
def fake_ssh(tmp_path, monkeypatch):
    """An ``ssh`` on PATH that prints each argument it receives"""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "ssh"
    script.write_text('#!/bin/sh\nfor arg in "$@"; do echo "ARG:$arg"; done\n')
    script.chmod(0o755)
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ['PATH']}")
    return script


@pytest.mark.skipif(sys.platform == "win32", reason="needs a POSIX shell")
class TestRemoteExecutorShell:
    """Test what ssh actually receives through the local shell."""

    def test_local_shell_expands_nothing(self, tmp_path, fake_ssh, monkeypatch):
        monkeypatch.setenv("LOCALONLY", "expanded-locally")
        app_dir = tmp_path / "sample"
        app_dir.mkdir()
        io = Io(app_dir)

        output = RemoteExecutor(FixedHostGit(io, "1.2.3.4"), io).exec("echo $LOCALONLY `echo tick` $(echo sub)")

        assert output.splitlines() == [
            "ARG:git@1.2.3.4",
            "ARG:cd sample; echo $LOCALONLY `echo tick` $(echo sub)",
        ]

    def test_app_name_with_spaces(self, tmp_path, fake_ssh):
        app_dir = tmp_path / "my app"
        app_dir.mkdir()
        io = Io(app_dir)

        output = RemoteExecutor(FixedHostGit(io, "1.2.3.4"), io).exec("ls")

        assert output.splitlines()[-1] == "ARG:cd 'my app'; ls"


class TestRemoteExecutor:
    """Test remote address resolution."""

    def test_missing_address(self, fake_io):
        with pytest.raises(GitRemoteDoesNotExistError):
            RemoteExecutor(FixedHostGit(fake_io, None), fake_io).exec("ls")
        assert fake_io.commands == []
