"""Declarative parameter and option schemas for commands"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..constants import HELP_COLUMN_WIDTH, HELP_INDENT


@dataclass(frozen=True)
class ParameterDef:
    """Positional parameter"""
    name: str
    type: type = str
    description: str = ""
    required: bool = True


@dataclass(frozen=True)
class OptionDef:
    """Named --option; value is the placeholder shown in help"""
    name: str
    type: type = str
    description: str = ""
    value: Optional[str] = None

    @property
    def usage(self) -> str:
        if self.value:
            return f"--{self.name}={self.value}"
        return f"--{self.name}"


@dataclass(frozen=True)
class CommandSpec:
    """Description, parameters and options of a command type"""
    description: str = ""
    parameters: Tuple[ParameterDef, ...] = ()
    options: Tuple[OptionDef, ...] = ()

    def usage(self, program: str, command: str) -> str:
        parts = [f"Usage: {program} {command}"]
        for parameter in self.parameters:
            parts.append(parameter.name if parameter.required else f"[{parameter.name}]")
        if self.options:
            parts.append("[options]")
        return " ".join(parts)

    def help(self, program: str, command: str) -> str:
        """
        Render help text

        Layout is fixed: description, usage line, then the parameters and
        options blocks with descriptions aligned on one column.
        """
        lines: List[str] = []
        if self.description:
            lines.extend([self.description, ""])

        lines.append(self.usage(program, command))

        if self.parameters:
            lines.extend(["", "Parameters:"])
            for parameter in self.parameters:
                description = parameter.description
                if not parameter.required:
                    description += ", optional"
                lines.append(_column(parameter.name, description))

        if self.options:
            lines.extend(["", "Options:"])
            for option in self.options:
                lines.append(_column(option.usage, option.description))

        return "\n".join(lines) + "\n"


def _column(label: str, description: str) -> str:
    return f"{HELP_INDENT}{label:<{HELP_COLUMN_WIDTH}}{description}"
