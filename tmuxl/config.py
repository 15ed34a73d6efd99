"""
tmuxl configuration management.

Configuration priority (highest to lowest):
1. CLI arguments (--verbose, etc.)
2. Config file (~/.config/tmuxl/config.json or platform-specific)
3. Environment variables (TMUXL_*)
4. Default values (zero-config)

Handles loading, saving, and defaults for CLI settings.
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict, fields, is_dataclass
from pathlib import Path
from typing import Any, Optional

import platformdirs

logger = logging.getLogger(__name__)


def coerce_value(expected: type, value: Any) -> Any:
    """
    Convert a raw config value (JSON or command line) to a field's type.

    Raises:
        ValueError: If the value can't represent the type.
    """
    if expected is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in ("true", "false"):
            return value.lower() == "true"
    elif expected is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                pass
    elif expected is str:
        if isinstance(value, str):
            return value
    raise ValueError(f"expected {expected.__name__}, got {value!r}")


@dataclass
class TmuxConfig:
    """tmux invocation settings."""

    binary: str = "tmux"
    cool_off: float = 0.25  # seconds to wait before each tmux command
    timeout: float = 10.0
    attach: bool = True  # attach to a session when not inside tmux


@dataclass
class LayoutConfig:
    """Layout adjustment settings."""

    focus_bottom_left: bool = True


@dataclass
class TmuxlConfig:
    """Main configuration container."""

    tmux: TmuxConfig = field(default_factory=TmuxConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    log_level: str = "WARNING"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "tmux": asdict(self.tmux),
            "layout": asdict(self.layout),
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TmuxlConfig":
        """Create from dictionary. Missing keys keep their defaults."""
        return cls().update(data)

    def update(self, data: dict) -> "TmuxlConfig":
        """
        Overlay the keys present in `data`.

        Raises:
            KeyError: Unknown key.
            ValueError: Value of the wrong type.
            TypeError: `data` is not a dictionary.
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected an object, got {type(data).__name__}")
        for key, value in data.items():
            if isinstance(value, dict):
                for name, item in value.items():
                    self.set_value(f"{key}.{name}", item)
            else:
                self.set_value(key, value)
        return self

    def set_value(self, key: str, value: Any) -> Any:
        """
        Set one setting by dotted key, e.g. "tmux.cool_off".

        Returns:
            The value stored, converted to the field's type.
        """
        parts = key.split(".")
        target = self
        for part in parts[:-1]:
            target = getattr(target, part, None)

        by_name = {f.name: f for f in fields(target)} if is_dataclass(target) else {}
        f = by_name.get(parts[-1])
        if f is None or is_dataclass(f.type):
            raise KeyError(key)

        value = coerce_value(f.type, value)
        setattr(target, f.name, value)
        return value

    def apply_env_overrides(self) -> "TmuxlConfig":
        """
        Apply environment variable overrides.

        Environment variables:
            TMUXL_TMUX_BINARY - path to the tmux executable
            TMUXL_COOL_OFF - seconds to wait before each tmux command
            TMUXL_ATTACH - true/false
            TMUXL_FOCUS_BOTTOM_LEFT - true/false
            TMUXL_LOG_LEVEL - DEBUG/INFO/WARNING/ERROR
        """
        if os.environ.get("TMUXL_TMUX_BINARY"):
            self.tmux.binary = os.environ["TMUXL_TMUX_BINARY"]
        if os.environ.get("TMUXL_COOL_OFF"):
            try:
                self.tmux.cool_off = float(os.environ["TMUXL_COOL_OFF"])
            except ValueError:
                logger.warning("ignoring invalid TMUXL_COOL_OFF=%r", os.environ["TMUXL_COOL_OFF"])
        if os.environ.get("TMUXL_ATTACH"):
            self.tmux.attach = os.environ["TMUXL_ATTACH"].lower() == "true"

        if os.environ.get("TMUXL_FOCUS_BOTTOM_LEFT"):
            self.layout.focus_bottom_left = os.environ["TMUXL_FOCUS_BOTTOM_LEFT"].lower() == "true"

        if os.environ.get("TMUXL_LOG_LEVEL"):
            self.log_level = os.environ["TMUXL_LOG_LEVEL"].upper()

        return self


def get_config_dir() -> Path:
    """
    Get platform-specific user config directory.

    Returns:
        - Linux: ~/.config/tmuxl (or $XDG_CONFIG_HOME/tmuxl)
        - macOS: ~/Library/Application Support/tmuxl
        - Windows: C:\\Users\\<user>\\AppData\\Roaming\\tmuxl
    """
    return Path(platformdirs.user_config_dir("tmuxl", appauthor=False))


def get_config_path() -> Path:
    """Get configuration file path."""
    return get_config_dir() / "config.json"


def load_config(path: Optional[Path] = None, apply_env: bool = True) -> TmuxlConfig:
    """
    Load configuration from file.

    Args:
        path: Config file path. Uses default if None.
        apply_env: Apply environment variable overrides underneath the
            file, so keys set in the file win over TMUXL_* variables.

    Returns:
        TmuxlConfig with loaded or default values.
    """
    config_path = path or get_config_path()
    config = TmuxlConfig()
    if apply_env:
        config.apply_env_overrides()

    if config_path.exists():
        try:
            with open(config_path) as f:
                data = json.load(f)
            config = TmuxlConfig.from_dict(config.to_dict()).update(data)
        except (json.JSONDecodeError, TypeError, KeyError, ValueError) as e:
            logger.warning("ignoring unreadable config %s: %s", config_path, e)

    return config


def save_config(config: TmuxlConfig, path: Optional[Path] = None) -> bool:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        path: Config file path. Uses default if None.

    Returns:
        True if successful.
    """
    config_path = path or get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            json.dump(config.to_dict(), f, indent=2)
        return True
    except OSError as e:
        logger.error("could not write config %s: %s", config_path, e)
        return False


def init_config(path: Optional[Path] = None) -> Path:
    """
    Initialize configuration file with defaults.

    Args:
        path: Config file path. Uses default if None.

    Returns:
        Path to created config file.
    """
    config_path = path or get_config_path()
    save_config(TmuxlConfig(), config_path)
    return config_path
