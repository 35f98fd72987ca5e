"""Tests for desktop notifications."""

import shlex

from webbynode.core import Notifier


class TestNotifier:
    """Test when and how the helper is invoked."""

    def test_sends_when_installed(self, fake_io):
        fake_io.programs.append("growlnotify")

        assert Notifier(fake_io).message("Deployed") is True
        assert fake_io.commands == ["growlnotify -t Webbynode -m Deployed"]

    def test_strips_ansi_codes(self, fake_io):
        fake_io.programs.append("growlnotify")

        Notifier(fake_io).message("\x1b[32mDeployed\x1b[0m")
        assert fake_io.commands == ["growlnotify -t Webbynode -m Deployed"]

    def test_skipped_when_not_installed(self, fake_io):
        assert Notifier(fake_io).message("Deployed") is False
        assert fake_io.commands == []

    def test_skipped_in_test_mode(self, fake_io):
        fake_io.programs.append("growlnotify")

        assert Notifier(fake_io, testing=True).message("Deployed") is False
        assert fake_io.commands == []

    def test_skipped_when_disabled(self, fake_io):
        fake_io.programs.append("growlnotify")

        assert Notifier(fake_io, enabled=False).message("Deployed") is False

    def test_custom_helper(self, fake_io):
        fake_io.programs.append("notify-send")

        Notifier(fake_io, helper="notify-send").message("Deployed")
        assert fake_io.commands[0].startswith("notify-send ")

    def test_installed_checked_once(self, fake_io):
        notifier = Notifier(fake_io)
        assert notifier.installed is False

        fake_io.programs.append("growlnotify")
        assert notifier.installed is False

    def test_message_is_shell_quoted(self, fake_io):
        fake_io.programs.append("growlnotify")

        Notifier(fake_io).message('Application `rm x` $(id) "quoted" deployed.')
        assert shlex.split(fake_io.commands[0]) == [
            "growlnotify", "-t", "Webbynode", "-m", 'Application `rm x` $(id) "quoted" deployed.'
        ]

    def test_image_passed_when_configured(self, fake_io):
        fake_io.programs.append("growlnotify")

        Notifier(fake_io, image="/opt/wn/webbynode.png").message("Deployed")
        assert fake_io.commands == ["growlnotify -t Webbynode -m Deployed --image /opt/wn/webbynode.png"]
