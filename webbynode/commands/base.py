"""Base class for wn commands"""

from typing import Any, ClassVar, Dict, Iterable, List, Optional, Tuple, Union

from .context import CommandContext
from .executor import CommandExecutor
from .registry import canonical_name
from .schema import CommandSpec
from ..exceptions import MissingParameterError

OptionValue = Union[str, bool]


def parse_args(tokens: Iterable[str]) -> Tuple[List[str], Dict[str, OptionValue]]:
    """
    Split raw tokens into positional params and --options

    ``--name=value`` maps name to value (one pair of surrounding double
    quotes is removed), a bare ``--name`` maps to True. Everything else
    is a param, kept in order.
    """
    params: List[str] = []
    options: Dict[str, OptionValue] = {}

    for token in tokens:
        if token.startswith('--'):
            name, separator, value = token[2:].partition('=')
            if separator:
                if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
                    value = value[1:-1]
                options[name] = value
            else:
                options[name] = True
        else:
            params.append(token)

    return params, options


class Command:
    """A command the wn client can run

    Subclasses declare ``spec`` and implement ``execute``. Register them
    with ``@register(...)`` to make them reachable from the command line.
    """

    spec: ClassVar[CommandSpec] = CommandSpec()
    requires_initialization: ClassVar[bool] = False

    def __init__(self, *args: str, context: Optional[CommandContext] = None):
        self.params, self.options = parse_args(args)
        self.context = context or CommandContext()

    @classmethod
    def command_name(cls) -> str:
        return canonical_name(cls.__name__)

    @property
    def command(self) -> str:
        return self.command_name()

    @property
    def console(self):
        return self.context.console

    def help(self) -> str:
        return self.spec.help(self.context.settings.program_name, self.command)

    def param(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Positional argument matched to the parameter called name"""
        for index, parameter in enumerate(self.spec.parameters):
            if parameter.name == name:
                return self.params[index] if index < len(self.params) else default
        raise KeyError(name)

    def option(self, name: str, default: Any = None) -> Any:
        return self.options.get(name, default)

    def missing_parameters(self) -> List[str]:
        return [
            parameter.name
            for index, parameter in enumerate(self.spec.parameters)
            if parameter.required and index >= len(self.params)
        ]

    def validate(self) -> None:
        """
        Raises:
            MissingParameterError: For the first required parameter not given
        """
        missing = self.missing_parameters()
        if missing:
            raise MissingParameterError(self.command, missing[0])

    def run(self) -> Any:
        return CommandExecutor(context=self.context).run(self)

    def execute(self) -> Any:
        raise NotImplementedError(f"{self.__class__.__name__} does not implement execute()")

    def out(self, line: str) -> None:
        self.console.print(line, markup=False, soft_wrap=True)

    def notify(self, message: str) -> None:
        self.context.notifier.message(message)
