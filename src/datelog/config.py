"""Configuration for datelog.

LoggerConfig holds the process-wide logging switches. Values live in an
immutable ConfigValues snapshot that is replaced as a whole on every
update, so a logging call that grabs the snapshot once sees a consistent
set of fields even while another thread reconfigures.

Layered resolution for load_config() (highest priority wins):
  1. Explicit overrides — keyword arguments or CLI flags
  2. Environment — DATELOG_* variables
  3. Project config — .datelog.json in the working tree
  4. Global config — ~/.datelog/config.json
  5. Built-in defaults
"""

import dataclasses
import json
import os
import threading
from dataclasses import dataclass
from pathlib import Path


DEFAULT_SUPPRESS_BEFORE_DATE = "2000-Jan-01"
DEFAULT_SOURCE_PREFIX = "datelog"

# Presence of this flag stands in for a build with a crash reporter linked in.
CRASH_REPORTS_ENV = "DATELOG_CRASH_REPORTS"

PROJECT_CONFIG_NAME = ".datelog.json"

_TRUE_VALUES = ('1', 'true', 'yes', 'on')
_FALSE_VALUES = ('0', 'false', 'no', 'off')


@dataclass(frozen=True)
class ConfigValues:
    """Immutable view of every config field at one point in time."""
    enabled: bool = True
    suppress_before_date: str = DEFAULT_SUPPRESS_BEFORE_DATE
    use_color: bool = False
    use_crash_report_sink: bool = False
    source_prefix: str = DEFAULT_SOURCE_PREFIX


FIELD_NAMES = tuple(f.name for f in dataclasses.fields(ConfigValues))
BOOL_FIELDS = ("enabled", "use_color", "use_crash_report_sink")


# Environment variable mapping: (field, type, env var)
ENV_MAPPING = [
    ("enabled", bool, "DATELOG_ENABLED"),
    ("suppress_before_date", str, "DATELOG_SUPPRESS_BEFORE"),
    ("use_color", bool, "DATELOG_USE_COLOR"),
    ("use_crash_report_sink", bool, CRASH_REPORTS_ENV),
    ("source_prefix", str, "DATELOG_SOURCE_PREFIX"),
]


def parse_bool(value):
    """Parse a boolean from text, returning None when unrecognized."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    return None


def _coerce_flags(changes):
    """Normalize bool fields through parse_bool.

    Raises:
        ValueError: if a bool field gets a value parse_bool does not accept
    """
    coerced = dict(changes)
    for field in BOOL_FIELDS:
        if field in coerced:
            flag = parse_bool(coerced[field])
            if flag is None:
                raise ValueError(
                    f"{field} expects a boolean, got {coerced[field]!r}")
            coerced[field] = flag
    return coerced


def crash_reporting_available():
    """True when the crash-report capability flag is set in the environment."""
    return bool(parse_bool(os.environ.get(CRASH_REPORTS_ENV, "")))


def default_values():
    """Return built-in defaults, honoring the crash-report capability flag."""
    return ConfigValues(use_crash_report_sink=crash_reporting_available())


class LoggerConfig:
    """Process-wide logging configuration.

    Fields are exposed as attributes; assignment and update() take effect
    on the next logging call.

    Usage::

        config = LoggerConfig(suppress_before_date="2016-Jan-01")
        config.enabled = False
        config.update(use_color=True, source_prefix="myapp")
        values = config.snapshot()
    """

    def __init__(self, **overrides):
        self._lock = threading.Lock()
        self._values = dataclasses.replace(default_values(),
                                           **_coerce_flags(overrides))

    def snapshot(self) -> ConfigValues:
        """Return the current values as one consistent, immutable object."""
        return self._values

    def update(self, **changes) -> ConfigValues:
        """Atomically replace one or more fields.

        Bool fields accept the same spellings as the environment layer
        ("true", "off", 1, ...).

        Raises:
            TypeError: if a field name is unknown
            ValueError: if a bool field gets an unrecognized value
        """
        changes = _coerce_flags(changes)
        with self._lock:
            self._values = dataclasses.replace(self._values, **changes)
            return self._values

    def reset(self) -> None:
        """Restore built-in defaults."""
        with self._lock:
            self._values = default_values()

    def __getattr__(self, name):
        if name in FIELD_NAMES:
            return getattr(self._values, name)
        raise AttributeError(name)

    def __setattr__(self, name, value):
        if name in FIELD_NAMES:
            self.update(**{name: value})
        else:
            super().__setattr__(name, value)

    def __repr__(self):
        fields = ", ".join(f"{n}={getattr(self._values, n)!r}"
                           for n in FIELD_NAMES)
        return f"LoggerConfig({fields})"


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.datelog/)."""
    return Path.home() / ".datelog"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .datelog.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from a file, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config():
    """Load the global config file."""
    return load_json(get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .datelog.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


def _file_values(data):
    """Pick known fields out of a JSON dict, normalizing hyphenated keys."""
    values = {}
    for key, value in data.items():
        field = key.replace("-", "_")
        if field not in FIELD_NAMES or value is None:
            continue
        if field in ("suppress_before_date", "source_prefix"):
            values[field] = str(value)
        else:
            flag = parse_bool(value)
            if flag is not None:
                values[field] = flag
    return values


def _env_values():
    """Read DATELOG_* environment variables; malformed values are skipped."""
    values = {}
    for field, type_, env_var in ENV_MAPPING:
        raw = os.environ.get(env_var)
        if raw is None:
            continue
        if type_ is bool:
            flag = parse_bool(raw)
            if flag is not None:
                values[field] = flag
        else:
            values[field] = raw
    return values


def resolve_values(path=None, start_dir=None, **overrides):
    """Resolve config fields using layered precedence.

    Args:
        path: Explicit config file; replaces the project and global layers
        start_dir: Where to start looking for .datelog.json
        **overrides: Highest-priority values; None means "not given"

    Returns:
        Dict with a value for every field.
    """
    resolved = dataclasses.asdict(ConfigValues())

    if path is not None:
        layers = [load_json(path)]
    else:
        project_cfg, _ = load_project_config(start_dir)
        layers = [load_global_config(), project_cfg]

    for data in layers:
        resolved.update(_file_values(data))
    resolved.update(_env_values())

    for key, value in overrides.items():
        if key not in FIELD_NAMES:
            raise TypeError(f"Unknown config field: {key!r}")
        if value is not None:
            resolved[key] = value
    return resolved


def load_config(path=None, start_dir=None, **overrides):
    """Build a LoggerConfig from files, environment and overrides."""
    return LoggerConfig(**resolve_values(path, start_dir, **overrides))


# ---------------------------------------------------------------------------
# Config writing
# ---------------------------------------------------------------------------
def save_project_config(data, directory=None):
    """Write .datelog.json to the given directory (default: cwd)."""
    target = Path(directory or os.getcwd()) / PROJECT_CONFIG_NAME
    with open(target, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return target


def save_global_config(data):
    """Write the global config file."""
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = get_global_config_path()
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return config_path
