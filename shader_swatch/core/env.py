"""Environment and .env loading for shader-swatch settings.

Load order (first wins):
  1. Existing OS environment variables: never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  SHADER_SWATCH_POLICY       permissive (default) | strict
  SHADER_SWATCH_SWATCH_SIZE  swatch edge in pixels for `swatches` (default 48)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)

# permissive: reject a vector only above 2.0, clamp the rest
# strict: reject a vector with any component outside [0, 1]
POLICY_PERMISSIVE = 'permissive'
POLICY_STRICT = 'strict'
POLICIES = (POLICY_PERMISSIVE, POLICY_STRICT)

DEFAULT_SWATCH_SIZE = 48


@dataclass(frozen=True)
class Settings:
    policy: str = POLICY_PERMISSIVE
    swatch_size: int = DEFAULT_SWATCH_SIZE


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git may be a dir (clone) or a file (worktree)
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value and KEY="value"."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            log.warning('env file not found: %s', env_file)
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def resolve_policy(explicit: str | None = None) -> str:
    """Pick the decode policy: explicit argument, then SHADER_SWATCH_POLICY, then permissive."""
    policy = (explicit or os.environ.get('SHADER_SWATCH_POLICY') or POLICY_PERMISSIVE).strip().lower()
    if policy not in POLICIES:
        raise ValueError(f'Unknown decode policy: {policy}. Available: {", ".join(POLICIES)}')
    return policy


def load_settings(policy: str | None = None) -> Settings:
    """Build Settings from the environment. Call load_env() first to pick up a .env."""
    raw_size = os.environ.get('SHADER_SWATCH_SWATCH_SIZE', '')
    try:
        size = int(raw_size) if raw_size else DEFAULT_SWATCH_SIZE
    except ValueError:
        log.warning('ignoring non-integer SHADER_SWATCH_SWATCH_SIZE=%r', raw_size)
        size = DEFAULT_SWATCH_SIZE
    return Settings(policy=resolve_policy(policy), swatch_size=max(1, size))
