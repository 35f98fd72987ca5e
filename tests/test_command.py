"""Tests for argument parsing and help rendering."""

import pytest

from webbynode.commands import Command, CommandSpec, OptionDef, ParameterDef, parse_args
from webbynode.exceptions import MissingParameterError


class NewCommand(Command):
    spec = CommandSpec(
        description="Initializes the current folder as a deployable application",
        parameters=(
            ParameterDef("webby", str, "Name or IP of the Webby to deploy to"),
            ParameterDef("dns", str, "The DNS used for this application", required=False),
        ),
        options=(
            OptionDef("passphrase", str, "If present, passphrase will be used when creating a new SSH key",
                      value="words"),
        )
    )


class TestParseArgs:
    """Test splitting tokens into params and options."""

    def test_params(self):
        assert parse_args(["param1", "param2"]) == (["param1", "param2"], {})

    def test_option_with_value(self):
        _, options = parse_args(["--provided=auto"])
        assert options["provided"] == "auto"

    def test_option_without_value(self):
        params, options = parse_args(["command", "--force"])
        assert options["force"] is True
        assert params == ["command"]

    def test_quoted_value(self):
        _, options = parse_args(['--name="Felipe Coury"'])
        assert options["name"] == "Felipe Coury"

    def test_partial_quotes_kept(self):
        _, options = parse_args(['--name="Felipe'])
        assert options["name"] == '"Felipe'

    def test_value_containing_equals(self):
        _, options = parse_args(["--env=A=B"])
        assert options["env"] == "A=B"

    def test_mixed(self):
        params, options = parse_args(["--provided=auto", "param1", "--force", "param2"])
        assert options == {"provided": "auto", "force": True}
        assert params == ["param1", "param2"]

    def test_last_option_wins(self):
        _, options = parse_args(["--branch=a", "--branch=b"])
        assert options["branch"] == "b"


class TestCommandInstance:
    """Test params and options on a command instance."""

    def test_constructor_parses(self):
        cmd = Command("param1", "--provided=auto", "param2")
        assert cmd.params == ["param1", "param2"]
        assert cmd.options["provided"] == "auto"

    def test_param_by_name(self):
        cmd = NewCommand("1.2.3.4")
        assert cmd.param("webby") == "1.2.3.4"
        assert cmd.param("dns") is None
        assert cmd.param("dns", "default") == "default"

    def test_unknown_param_name(self):
        with pytest.raises(KeyError):
            NewCommand("1.2.3.4").param("nope")

    def test_missing_parameters(self):
        assert NewCommand().missing_parameters() == ["webby"]
        assert NewCommand("1.2.3.4").missing_parameters() == []

    def test_validate(self):
        with pytest.raises(MissingParameterError) as exc_info:
            NewCommand("--passphrase=x").validate()
        assert exc_info.value.parameter == "webby"

    def test_execute_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Command().execute()


class TestHelp:
    """Test help text layout."""

    @pytest.fixture
    def help_text(self):
        return NewCommand.spec.help("wn", "new_command")

    def test_usage_line(self, help_text):
        assert "Usage: wn new_command webby [dns] [options]" in help_text

    def test_parameters_block(self, help_text):
        assert "Parameters:" in help_text
        assert "    webby                       Name or IP of the Webby to deploy to" in help_text
        assert "    dns                         The DNS used for this application, optional" in help_text

    def test_options_block(self, help_text):
        assert "Options:" in help_text
        assert ("    --passphrase=words          "
                "If present, passphrase will be used when creating a new SSH key") in help_text

    def test_description_first(self, help_text):
        assert help_text.startswith("Initializes the current folder as a deployable application\n")

    def test_no_options_block_without_options(self):
        text = CommandSpec(parameters=(ParameterDef("app"),)).help("wn", "thing")
        assert "Usage: wn thing app\n" in text
        assert "Options:" not in text

    def test_flag_option_without_placeholder(self):
        text = CommandSpec(options=(OptionDef("force", bool, "Overwrite"),)).help("wn", "thing")
        assert "    --force                     Overwrite" in text

    def test_instance_help_uses_program_name(self, fake_io, make_context):
        cmd = NewCommand(context=make_context(fake_io))
        assert "Usage: wn new_command webby [dns] [options]" in cmd.help()
