"""Send the application to the Webby"""

from .base import Command
from .registry import register
from .schema import CommandSpec, OptionDef
from ..constants import EMOJI_ROCKET, REMOTE_NAME


@register("deploy")
class Push(Command):
    spec = CommandSpec(
        description="Sends pending changes on the current application to your Webby",
        options=(
            OptionDef("branch", str, "Local branch to push, defaults to master", value="name"),
        )
    )
    requires_initialization = True

    def execute(self):
        app_name = self.context.io.app_name()
        branch = self.option("branch")
        if not isinstance(branch, str) or not branch:
            branch = self.context.settings.branch

        self.out(f"{EMOJI_ROCKET} Publishing {app_name} to Webbynode...")
        output = self.context.io.exec(f"git push {REMOTE_NAME} {branch}")
        if output:
            self.out(output.rstrip())

        self.notify(f"{app_name} deployed.")
        return output
