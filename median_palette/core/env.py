"""Environment and .env configuration for median-palette.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  MEDIAN_PALETTE_ITERATIONS  default for --iterations
  MEDIAN_PALETTE_OUT         default for --out-filename
"""

import os
from dataclasses import dataclass
from pathlib import Path

from median_palette.core.errors import ConfigError

ITERATIONS_VAR = 'MEDIAN_PALETTE_ITERATIONS'
OUT_VAR = 'MEDIAN_PALETTE_OUT'

DEFAULT_ITERATIONS = 1
DEFAULT_OUT_FILENAME = 'palette'


def _find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above start, without crossing a .git boundary."""
    for directory in [start.resolve(), *start.resolve().parents]:
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a clone, a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes around values are stripped, # lines skipped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


@dataclass
class Settings:
    """Defaults for CLI options, resolved from the environment."""

    iterations: int = DEFAULT_ITERATIONS
    out_filename: str = DEFAULT_OUT_FILENAME

    @classmethod
    def from_env(cls) -> 'Settings':
        settings = cls()
        raw_iterations = os.environ.get(ITERATIONS_VAR, '').strip()
        if raw_iterations:
            try:
                settings.iterations = int(raw_iterations)
            except ValueError as e:
                raise ConfigError(f'{ITERATIONS_VAR} must be an integer, got {raw_iterations!r}') from e
        out = os.environ.get(OUT_VAR, '').strip()
        if out:
            settings.out_filename = out
        return settings
