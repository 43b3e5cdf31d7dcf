"""Command auto-discovery and registration.

Scans webcolor/commands/ for modules that define a `command` object of type
Command and collects them into a dict keyed by name. Frozen binaries, where
pkgutil.iter_modules finds nothing, fall back to the explicit module list.
"""

import importlib
import pkgutil

from webcolor.core.types import Command

_registry: dict[str, Command] = {}

# Fallback for frozen binaries; keep in sync with webcolor/commands/
_COMMAND_MODULES = [
    'alpha',
    'contrast',
    'contrasting',
    'info',
    'invert',
    'sample',
    'shade',
    'swatch',
]


def discover() -> dict[str, Command]:
    """Import all command modules and return the registry."""
    if _registry:
        return _registry

    import webcolor.commands as pkg

    found = [name for _finder, name, _ispkg in pkgutil.iter_modules(pkg.__path__) if not name.startswith('_')]
    for modname in found or _COMMAND_MODULES:
        module = importlib.import_module(f'webcolor.commands.{modname}')
        cmd = getattr(module, 'command', None)
        if isinstance(cmd, Command):
            _registry[cmd.name] = cmd

    return _registry


def get(name: str) -> Command:
    """Get a command by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_commands() -> dict[str, Command]:
    return discover()
