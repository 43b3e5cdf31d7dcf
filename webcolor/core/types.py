"""Shared types for webcolor: ColorRecord, ParseFailure, Command, Report."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ColorRecord:
    """Canonical parse result. Channels are not clamped."""

    r: float = 0
    g: float = 0
    b: float = 0
    a: float = 1


@dataclass(frozen=True)
class ParseFailure:
    """Returned (never raised) when an input matches no colour grammar."""

    value: Any
    reason: str

    def __bool__(self) -> bool:
        return False


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='invert', help='Invert colours')

        @command.arguments
        def add_arguments(parser):
            parser.add_argument('colors', nargs='+')

        @command.run
        def run(report, args, settings):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._args_fn: Callable | None = None

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the argparse setup function."""
        self._args_fn = fn
        return fn

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def configure(self, parser: argparse.ArgumentParser) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, report: Report, args: Any, settings: Any) -> None:
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(report, args, settings)


@dataclass
class Report:
    """Accumulates command results for text/JSON output."""

    command: str = ''
    entries: dict[str, dict[str, Any]] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)
    pass_count: int = 0
    fail_count: int = 0

    def add(self, label: str, data: dict[str, Any]) -> None:
        """Add (or extend) the result block for one label."""
        self.entries.setdefault(label, {}).update(data)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def record_pass(self) -> None:
        self.pass_count += 1

    def record_fail(self) -> None:
        self.fail_count += 1
