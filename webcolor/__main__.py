"""webcolor — parse colours, check WCAG contrast, find readable colours.

Usage: webcolor [--env-file PATH] [-v] <command> [args] [-j] [-f rgb|hex]

Commands are auto-discovered from webcolor/commands/.
Each command module's docstring is its documentation.
Run `webcolor help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, webcolor looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import logging
import sys

from webcolor import registry
from webcolor.core.env import FORMATS, Settings, load_env
from webcolor.core.report import format_json, format_text
from webcolor.core.types import Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'webcolor.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  webcolor info rebeccapurple "#43C40399"\n'
        '  webcolor contrast "#fff" "#767676" --fail-below 4.5\n'
        '  webcolor contrasting "#333" --target "#444"\n'
        '  webcolor shade "#3366cc" -0.25 --format hex\n'
        '  webcolor sample screenshot.png --box 0,0,280,800 --json\n'
        '  webcolor help contrasting\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  WEBCOLOR_MIN_RATIO  default minimum contrast ratio (4.5)\n'
        '  WEBCOLOR_FORMAT     default output format, rgb or hex (rgb)\n'
    )
    parser = argparse.ArgumentParser(
        prog='webcolor',
        description='Parse colours, check WCAG contrast and find readable colours.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging on stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        cmd.configure(p)
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-f', '--format', choices=FORMATS, default=None, help='Colour output format')

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<12} {_short_help(name, cmd.help)}')
        print('\nRun: webcolor help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    print(doc or f'(No module docs for {topic!r})')


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format='%(levelname)s %(name)s: %(message)s')

    # Load .env before reading settings; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'webcolor: loaded {env_path}', file=sys.stderr)
    settings = Settings.from_env()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    report = Report(command=args.command)
    registry.get(args.command).execute(report, args, settings)

    for message in report.errors:
        print(f'Error: {message}', file=sys.stderr)

    if report.entries or not report.errors:
        print(format_json(report) if args.json else format_text(report))

    # Exit status comes after output so the report is visible on failure
    if report.errors:
        sys.exit(1)
    if getattr(args, 'fail_below', None) is not None and report.fail_count:
        sys.exit(1)


if __name__ == '__main__':
    main()
