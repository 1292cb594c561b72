"""Configuration management for Fret Log components."""

from dataclasses import asdict, dataclass, fields, replace
from typing import Dict, Any, Optional
import json
import os
from pathlib import Path

from ..logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ValidationConfig:
    """Tunable thresholds for scale validation."""

    pitch_tolerance: float = 50.0  # cents (100 cents = 1 semitone), documents intent only
    minimum_note_duration: float = 0.2  # seconds a note must be held
    timing_tolerance: float = 2.0  # max seconds between notes, reserved and not enforced
    confidence_threshold: float = 0.6  # minimum confidence for a pitch estimate
    passing_accuracy: float = 0.75  # fraction of expected notes that must match

    def __post_init__(self):
        for name in self.field_names():
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")
        for name in ("confidence_threshold", "passing_accuracy"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0 and 1, got {value}")
        for name in ("pitch_tolerance", "minimum_note_duration", "timing_tolerance"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "ValidationConfig":
        """Build a config from a dict, ignoring keys this version doesn't know."""
        known = set(cls.field_names())
        unknown = set(values) - known
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {sorted(unknown)}")
        try:
            numeric = {k: float(v) for k, v in values.items() if k in known}
        except (TypeError, ValueError) as e:
            raise ValueError(f"Configuration values must be numbers: {e}") from e
        return cls(**numeric)

    def with_overrides(self, **changes: Any) -> "ValidationConfig":
        """Return a copy with the given fields replaced.

        Raises:
            ValueError: If a key is not a configuration field
        """
        unknown = set(changes) - set(self.field_names())
        if unknown:
            raise ValueError(f"Unknown configuration fields: {sorted(unknown)}")
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


class ConfigManager:
    """JSON-file store for named validation config profiles."""

    def __init__(self, config_dir: Optional[str] = None):
        """Initialize the configuration manager.

        Args:
            config_dir: Directory to store configuration files, or None to use default
        """
        if config_dir is None:
            # Use ~/.config/fret_log by default
            home = os.path.expanduser("~")
            config_dir = os.path.join(home, ".config", "fret_log")

        self.config_dir = Path(config_dir)
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.default_config = ValidationConfig().to_dict()
        self.configs: Dict[str, Dict[str, Any]] = {}

    def _config_file(self, name: str) -> Path:
        return self.config_dir / f"{name}.json"

    def load_config(self, name: str = "default") -> Dict[str, Any]:
        """Load a profile from file or create it from defaults.

        Args:
            name: Profile name

        Returns:
            Configuration dictionary
        """
        config_file = self._config_file(name)

        if config_file.exists():
            try:
                with open(config_file, "r") as f:
                    config = json.load(f)
                if not isinstance(config, dict):
                    raise ValueError("expected a JSON object")
                logger.info(f"Loaded configuration from {config_file}")

                # Ensure all default keys are present
                for key, value in self.default_config.items():
                    if key not in config:
                        config[key] = value

                # Non-numeric or out-of-range values make the file unusable
                ValidationConfig.from_dict(config)
            except (OSError, ValueError) as e:
                logger.error(f"Error loading configuration from {config_file}: {e}")
                config = self.default_config.copy()
        else:
            # Create default configuration
            config = self.default_config.copy()
            self.save_config(name, config)

        self.configs[name] = config
        return config.copy()

    def save_config(self, name: str, config: Dict[str, Any]) -> bool:
        """Save configuration to file.

        Args:
            name: Profile name
            config: Configuration dictionary

        Returns:
            True if saved successfully, False otherwise
        """
        config_file = self._config_file(name)

        try:
            with open(config_file, "w") as f:
                json.dump(config, f, indent=2)
            logger.info(f"Saved configuration to {config_file}")
            return True
        except OSError as e:
            logger.error(f"Error saving configuration to {config_file}: {e}")
            return False

    def get_config(self, name: str = "default") -> ValidationConfig:
        """Get a profile as a ValidationConfig, loading it on first use.

        Raises:
            ValueError: If the stored values are out of range
        """
        if name not in self.configs:
            self.load_config(name)
        return ValidationConfig.from_dict(self.configs[name])

    def update_config(self, name: str, updates: Dict[str, Any]) -> bool:
        """Update a profile and save it to file.

        Args:
            name: Profile name
            updates: Dictionary of updates to apply

        Returns:
            True if updated and saved successfully, False otherwise
        """
        # Validate before touching the stored profile
        try:
            self.get_config(name).with_overrides(**updates)
        except ValueError as e:
            logger.error(f"Rejected update for configuration {name}: {e}")
            return False

        self.configs[name].update(updates)
        return self.save_config(name, self.configs[name])

    def reset_config(self, name: str = "default") -> bool:
        """Reset a profile to defaults and save it.

        Args:
            name: Profile name

        Returns:
            True if reset successfully, False otherwise
        """
        self.configs[name] = self.default_config.copy()
        return self.save_config(name, self.configs[name])
