"""Run a shell command on the Webby"""

from .base import Command
from .registry import register
from .schema import CommandSpec, ParameterDef


@register()
class Remote(Command):
    spec = CommandSpec(
        description="Executes a command in the application folder on your Webby",
        parameters=(
            ParameterDef("command", str, "Command to execute remotely"),
        )
    )
    requires_initialization = True

    def execute(self):
        # extra words belong to the remote command line
        remote_command = " ".join(self.params)
        output = self.context.remote_executor.exec(remote_command)
        if output:
            self.out(output.rstrip())
        return output
