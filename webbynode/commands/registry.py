"""Command registry: maps command names and aliases to command types"""

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Tuple, Type

from .schema import CommandSpec
from ..exceptions import CommandNotFoundError

if TYPE_CHECKING:
    from .base import Command


def canonical_name(identifier: str) -> str:
    """
    Convert a CamelCase identifier into its command name

    SomeStrangeStuff -> some_strange_stuff
    RandomThoughtsIHad -> random_thoughts_i_had
    """
    name = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1_\2', identifier)
    name = re.sub(r'([a-z\d])([A-Z])', r'\1_\2', name)
    return name.replace('-', '_').lower()


def camelize(name: str) -> str:
    """Convert a command token into a type identifier (zap_it -> ZapIt)"""
    return "".join(part.capitalize() for part in name.split('_'))


@dataclass(frozen=True)
class CommandEntry:
    """Registration record for a command type"""
    name: str
    identifier: str
    command_class: Type['Command']
    spec: CommandSpec
    aliases: Tuple[str, ...] = ()


class CommandRegistry:
    """Lookup table of command types

    Types are reachable by their identifier (the class name), their
    canonical name and every alias they declared.
    """

    def __init__(self):
        self._by_identifier: Dict[str, CommandEntry] = {}
        self._by_name: Dict[str, CommandEntry] = {}

    def register(self, command_class: Type['Command'], aliases: Iterable[str] = ()) -> CommandEntry:
        identifier = command_class.__name__
        entry = CommandEntry(
            name=canonical_name(identifier),
            identifier=identifier,
            command_class=command_class,
            spec=command_class.spec,
            aliases=tuple(aliases)
        )

        if identifier in self._by_identifier:
            raise ValueError(f"Command already registered: {identifier}")
        for name in (entry.name,) + entry.aliases:
            if name in self._by_name:
                raise ValueError(f"Command name already taken: {name}")

        self._by_identifier[identifier] = entry
        for name in (entry.name,) + entry.aliases:
            self._by_name[name] = entry

        return entry

    def entry(self, name: str) -> CommandEntry:
        """
        Find the registration for a command token

        Aliases and canonical names are looked up first, then the token is
        camelized and matched against type identifiers.

        Raises:
            CommandNotFoundError: If nothing matches
        """
        entry = self._by_name.get(name) or self._by_identifier.get(camelize(name))
        if entry is None:
            raise CommandNotFoundError(name)
        return entry

    def resolve(self, name: str) -> Type['Command']:
        return self.entry(name).command_class

    def find(self, name: str) -> Optional[CommandEntry]:
        try:
            return self.entry(name)
        except CommandNotFoundError:
            return None

    def entries(self) -> List[CommandEntry]:
        return sorted(self._by_identifier.values(), key=lambda e: e.name)

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None


registry = CommandRegistry()


def register(*aliases: str, target: Optional[CommandRegistry] = None):
    """Class decorator adding a command type to a registry

    Example:
        @register("deploy")
        class Push(Command):
            ...
    """
    def decorator(command_class):
        (target or registry).register(command_class, aliases)
        return command_class

    return decorator
