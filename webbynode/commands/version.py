"""Print the client version"""

from .base import Command
from .registry import register
from .schema import CommandSpec
from ..__version__ import __version__


@register()
class Version(Command):
    spec = CommandSpec(description="Displays the version of the Webbynode client")

    def execute(self):
        line = f"{self.context.settings.program_name} {__version__}"
        self.out(line)
        return line
