"""Command discovery.

Every public module in colour_kit/commands/ that defines a module-level
`command` (a Command instance) becomes a subcommand under that command's name.
Modules are imported once, on first lookup.
"""

import importlib
import pkgutil

from colour_kit.core.types import Command

_commands: dict[str, Command] = {}


def _command_modules() -> list[str]:
    import colour_kit.commands as pkg

    return sorted(name for _finder, name, _ispkg in pkgutil.iter_modules(pkg.__path__) if not name.startswith('_'))


def discover() -> dict[str, Command]:
    """Import every command module and return name -> Command."""
    if _commands:
        return _commands

    for modname in _command_modules():
        module = importlib.import_module(f'colour_kit.commands.{modname}')
        cmd = getattr(module, 'command', None)
        if not isinstance(cmd, Command):
            continue
        if cmd.name in _commands:
            raise RuntimeError(f'Command {cmd.name!r} defined twice (second in commands/{modname}.py)')
        _commands[cmd.name] = cmd
    return _commands


def get(name: str) -> Command:
    """Get a command by name."""
    commands = discover()
    if name not in commands:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(commands))}')
    return commands[name]


def all_commands() -> dict[str, Command]:
    return discover()
