"""Configuration for the webcolor CLI: .env loading and Settings.

Precedence (first wins):
  1. Variables already in the OS environment, which are never overwritten.
  2. The file named by --env-file, when given.
  3. The nearest .env walking up from the working directory. The walk stops
     at the first directory holding .git (dir or worktree file), so a .env
     outside the repository is never read.

Recognised variables:
  WEBCOLOR_MIN_RATIO   default minimum contrast ratio (4.5)
  WEBCOLOR_FORMAT      default output format, 'rgb' or 'hex' (rgb)
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

FORMATS = ('rgb', 'hex')


def find_dotenv(start: Path) -> Path | None:
    """Return the closest .env at or above `start`, without crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            break
    return None


def read_dotenv(path: Path) -> dict[str, str]:
    """KEY=value lines; blank lines, comments and lines without '=' are skipped."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ for keys that are not set yet.

    Returns the file that was read, or None.
    """
    path = Path(env_file) if env_file else find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None
    for key, value in read_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


@dataclass(frozen=True)
class Settings:
    min_ratio: float = 4.5
    output_format: str = 'rgb'

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> 'Settings':
        """Read WEBCOLOR_* variables. Invalid values are logged and ignored."""
        env = os.environ if environ is None else environ
        defaults = cls()
        min_ratio = defaults.min_ratio
        output_format = defaults.output_format

        raw_ratio = env.get('WEBCOLOR_MIN_RATIO')
        if raw_ratio:
            try:
                value = float(raw_ratio)
            except ValueError:
                value = None
            if value is not None and 1 <= value <= 21:
                min_ratio = value
            else:
                logger.warning('ignoring WEBCOLOR_MIN_RATIO=%r: expected a number from 1 to 21', raw_ratio)

        raw_format = env.get('WEBCOLOR_FORMAT')
        if raw_format:
            if raw_format.strip().lower() in FORMATS:
                output_format = raw_format.strip().lower()
            else:
                logger.warning('ignoring WEBCOLOR_FORMAT=%r: expected one of %s', raw_format, ', '.join(FORMATS))

        return cls(min_ratio=min_ratio, output_format=output_format)
