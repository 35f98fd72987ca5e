"""Reader for git configuration files"""

from pathlib import Path
from typing import Any, Dict, Union

from ..constants import CONFIG_SECTION_PATTERN, CONFIG_SEPARATOR
from ..exceptions import ConfigParseError

ConfigTree = Dict[str, Any]


def parse(text: str) -> ConfigTree:
    """
    Parse git config text into a nested dictionary

    ``[core]`` becomes ``tree["core"]`` and ``[remote "origin"]`` becomes
    ``tree["remote"]["origin"]``. Values are kept as raw strings. Lines
    that are neither a section header nor a ``key = value`` pair are
    skipped.

    Args:
        text: Contents of a git config file

    Returns:
        Parsed configuration tree
    """
    config: ConfigTree = {}
    current = config

    for line in text.splitlines():
        match = CONFIG_SECTION_PATTERN.match(line)
        if match:
            section, subkey = match.group(1), match.group(2)
            current = config.setdefault(section, {})
            if subkey:
                current = current.setdefault(subkey, {})
            continue

        key, separator, value = line.strip().partition(CONFIG_SEPARATOR)
        if separator:
            current[key] = value

    return config


def load(path: Union[str, Path]) -> ConfigTree:
    """
    Read and parse a git config file

    Raises:
        ConfigParseError: If the file cannot be read
    """
    try:
        with open(path, 'r') as f:
            text = f.read()
    except OSError as e:
        raise ConfigParseError(f"Cannot read git config {path}: {e}") from e

    return parse(text)
