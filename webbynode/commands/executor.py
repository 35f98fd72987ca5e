"""Resolve and run commands"""

import logging
from typing import TYPE_CHECKING, Any, Optional, Sequence

from .context import CommandContext
from .registry import CommandRegistry, registry as default_registry

if TYPE_CHECKING:
    from .base import Command

DEFAULT_COMMAND = "help"


class CommandExecutor:
    """Turn argument vectors into commands and run them

    Commands that declare ``requires_initialization`` go through the
    precondition chain first. Errors from the chain or the command are
    not caught here.
    """

    def __init__(self,
                 registry: Optional[CommandRegistry] = None,
                 context: Optional[CommandContext] = None):
        self.registry = registry or default_registry
        self.context = context or CommandContext()
        self.logger = logging.getLogger("CommandExecutor")

    def resolve(self, tokens: Sequence[str]) -> 'Command':
        """
        Instantiate the command named by the first token

        Raises:
            CommandNotFoundError: If the name is not registered
        """
        name, *args = tokens or [DEFAULT_COMMAND]
        command_class = self.registry.resolve(name)
        self.logger.debug(f"Resolved '{name}' to {command_class.__name__}")
        return command_class(*args, context=self.context)

    def run(self, command: 'Command') -> Any:
        if command.requires_initialization:
            command.context.preconditions.check()

        self.logger.debug(f"Running {command.command} params={command.params} options={command.options}")
        return command.execute()

    def dispatch(self, tokens: Sequence[str]) -> Any:
        return self.run(self.resolve(tokens))
