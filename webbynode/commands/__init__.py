"""wn commands

Importing this package registers the built-in commands.
"""

from .base import Command, parse_args
from .context import CommandContext
from .executor import CommandExecutor
from .registry import CommandEntry, CommandRegistry, canonical_name, camelize, register, registry
from .schema import CommandSpec, OptionDef, ParameterDef

from . import init
from . import push
from . import remote
from . import help
from . import version

__all__ = [
    "Command",
    "CommandContext",
    "CommandEntry",
    "CommandExecutor",
    "CommandRegistry",
    "CommandSpec",
    "OptionDef",
    "ParameterDef",
    "camelize",
    "canonical_name",
    "parse_args",
    "register",
    "registry",
]
