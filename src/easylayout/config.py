from dataclasses import dataclass, field, fields
from typing import Optional
from pathlib import Path
import os
import tomllib
import warnings
from .coordinates import Absolute, Spacing, SpacingError, spacing

RC_FILENAME = ".easylayoutrc.toml"


def find_config_file() -> Optional[Path]:
    """
    First existing rc file in the working directory, the home directory or
    `$XDG_CONFIG_HOME/easylayout/config.toml`.
    """
    home = Path.home()
    xdg_config = Path(os.environ.get("XDG_CONFIG_HOME", str(home / ".config")))
    candidates = [Path.cwd() / RC_FILENAME, home / RC_FILENAME]
    candidates.append(xdg_config / "easylayout" / "config.toml")
    return next((path for path in candidates if path.exists()), None)


def _parse_config_value(key: str, value: object) -> object:
    """Convert config file values to proper types."""
    # Spacing values are numbers (absolute) or strings like "5%"
    if key in ("padding", "gap"):
        return spacing(value)

    if key in ("container_width", "container_height"):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise SpacingError(f"{key} must be a number, got {value!r}")
        return float(value)

    if key in ("strict_units", "validate_areas"):
        if not isinstance(value, bool):
            raise ValueError(f"{key} must be true or false, got {value!r}")

    return value


@dataclass
class Config:
    """
    Defaults for `compute_rects` and `compute_coordinates`. These only apply
    when passed explicitly as `config=`.
    """

    # Spacing applied on all four container edges, and between grid lines.
    padding: Spacing = field(default_factory=lambda: Absolute(0))
    gap: Spacing = field(default_factory=lambda: Absolute(0))

    # Container size used to turn absolute spacing into percentages.
    container_width: Optional[float] = None
    container_height: Optional[float] = None

    # Raise instead of reading absolute spacing as a percentage when no
    # container size is known.
    strict_units: bool = False

    # Reject areas that don't form a filled rectangle.
    validate_areas: bool = False

    @staticmethod
    def from_dict(data: dict[str, object]) -> "Config":
        """Build a config from parsed TOML, ignoring unknown keys."""
        known = {f.name for f in fields(Config)}
        return Config(
            **{
                key: _parse_config_value(key, value)
                for key, value in data.items()
                if key in known
            }
        )

    @staticmethod
    def load(path: Path | str) -> "Config":
        """
        Load config from a TOML file. A missing file gives the defaults.
        """
        path = Path(path)
        if not path.exists():
            return Config()
        with open(path, "rb") as f:
            return Config.from_dict(tomllib.load(f))


_default_config: Optional[Config] = None


def default_config() -> Config:
    """
    Config from the first rc file `find_config_file` finds, cached for the
    session. An unreadable file is reported with a warning and gives the
    defaults.
    """
    global _default_config
    if _default_config is None:
        path = find_config_file()
        config = Config()
        if path is not None:
            try:
                config = Config.load(path)
            except (OSError, tomllib.TOMLDecodeError) as e:
                warnings.warn(f"Failed to load config from {path}: {e}")
        _default_config = config
    return _default_config


def set_default_config(config: Optional[Config]) -> None:
    """
    Replace the session's default config. Passing `None` makes the next call to
    `default_config` look for an rc file again.
    """
    global _default_config
    _default_config = config
