"""Show help for commands"""

from rich import box
from rich.table import Table

from .base import Command
from .registry import registry, register
from .schema import CommandSpec, ParameterDef


@register("h")
class Help(Command):
    spec = CommandSpec(
        description="Displays help for a command, or lists all commands",
        parameters=(
            ParameterDef("command", str, "Command to show help for", required=False),
        )
    )

    def execute(self):
        name = self.param("command")
        if name:
            entry = registry.entry(name)
            text = entry.spec.help(self.context.settings.program_name, entry.name)
            self.out(text.rstrip())
            return text

        table = Table(title="Available commands", box=box.SIMPLE)
        table.add_column("Command", style="cyan")
        table.add_column("Aliases", style="dim")
        table.add_column("Description")

        for entry in registry.entries():
            table.add_row(entry.name, ", ".join(entry.aliases), entry.spec.description)

        self.console.print(table)
        self.out(f"Use '{self.context.settings.program_name} help <command>' for details.")
        return table
