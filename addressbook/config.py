"""Configuration management for addressbook."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from addressbook.commands.parser import ADD_COMMAND_ARGS
from addressbook.commands.tokenizer import validate_arguments
from addressbook.data.types import Argument, NonPrefixedArgument


CONFIG_DIR = Path.home() / ".config" / "addressbook"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Application configuration."""

    log_level: str = DEFAULT_LOG_LEVEL
    # Add command field name -> prefix, e.g. {"phone": "ph/"}
    prefixes: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path = CONFIG_FILE) -> "Config":
        """Load config from file, or return defaults."""
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = json.load(f)
                log_level = data.get("log_level", DEFAULT_LOG_LEVEL)
                return cls(
                    log_level=log_level if log_level in LOG_LEVELS else DEFAULT_LOG_LEVEL,
                    prefixes=_string_prefixes(data.get("prefixes")),
                )
        except (json.JSONDecodeError, OSError, AttributeError, TypeError, ValueError):
            return cls()

    def save(self, path: Path = CONFIG_FILE) -> None:
        """Save config to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "log_level": self.log_level,
            "prefixes": self.prefixes,
        }
        with open(path, "w") as f:
            json.dump(data, f, indent=2)

    def add_command_args(self) -> List[Argument]:
        """Build the add command descriptors with prefix overrides applied.

        Raises:
            InvalidArgumentsError: If the overrides clash with each other
        """
        arguments: List[Argument] = []
        for argument in ADD_COMMAND_ARGS:
            prefix = self.prefixes.get(argument.name)
            if prefix is None or isinstance(argument, NonPrefixedArgument):
                arguments.append(argument)
            else:
                arguments.append(type(argument)(argument.name, prefix))
        validate_arguments(arguments)
        return arguments


def _string_prefixes(raw: object) -> Dict[str, str]:
    """Keep only str -> str entries of a prefixes mapping."""
    if not isinstance(raw, dict):
        return {}
    return {k: v for k, v in raw.items() if isinstance(k, str) and isinstance(v, str)}


def get_config() -> Config:
    """Get the application config."""
    return Config.load()
