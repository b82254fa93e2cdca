from typing import Any, Optional
import json
import os
from pydantic import BaseModel, Field
from loguru import logger
from .events import Signal

# --- Settings Models ---
class LoggingSettings(BaseModel):
    debug_mode: bool = True
    log_dir: Optional[str] = None  # No file sink when unset

class CommandSettings(BaseModel):
    trace_transitions: bool = False  # Log every apply/revert at DEBUG

class AppConfig(BaseModel):
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    commands: CommandSettings = Field(default_factory=CommandSettings)

# --- Manager ---
class ConfigManager:
    """
    Manages library configuration with persistence and reactivity.

    JSON files are saved on every update. TOML files are read-only:
    updates apply in memory and a warning is logged.
    """
    def __init__(self, filepath: str = "revertible.json"):
        self.filepath = filepath
        self._data = AppConfig()
        self.on_changed = Signal("ConfigChanged")
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    @property
    def read_only(self) -> bool:
        return self.filepath.endswith('.toml')

    def update(self, section: str, key: str, value: Any):
        """Update a setting, validate via Pydantic, save (JSON only), and emit change event."""
        if not hasattr(self._data, section):
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if key not in type(section_obj).model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")

        updated = type(section_obj).model_validate({**section_obj.model_dump(), key: value})
        setattr(self._data, section, updated)
        if self.read_only:
            logger.warning(f"Config {self.filepath} is TOML (read-only); {section}.{key} changed in memory only")
        else:
            self._save()
        self.on_changed.emit(section, key, getattr(updated, key))

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self._data, section)
        return getattr(section_obj, key)

    def _load(self):
        """Load settings from JSON or TOML file if present; otherwise keep defaults."""
        if os.path.isfile(self.filepath):
            try:
                if self.read_only:
                    import tomllib
                    with open(self.filepath, "rb") as f:
                        raw = tomllib.load(f)
                else:
                    with open(self.filepath, "r", encoding="utf-8") as f:
                        raw = json.load(f)
                self._data = AppConfig.model_validate(raw)
            except Exception as e:
                logger.error(f"Failed to load config from {self.filepath}: {e}")
                if not self.read_only:
                    self._save()
        elif not self.read_only:
            self._save()

    def _save(self):
        """Persist current config to JSON file."""
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(), f, indent=4)
        except Exception as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")

# --- Active config ---
_active: Optional[ConfigManager] = None

def get_config() -> Optional[ConfigManager]:
    return _active

def set_config(manager: Optional[ConfigManager]) -> None:
    """Make ``manager`` the source commands read their settings from."""
    global _active
    _active = manager

def get_command_settings() -> CommandSettings:
    """Live ``commands`` section of the active config, or defaults."""
    if _active is None:
        return CommandSettings()
    return _active.data.commands

def configure(filepath: str = "revertible.json") -> ConfigManager:
    """
    Load config, activate it and set up logging from its ``logging`` section.

    Later updates to the ``logging`` section re-run setup_logging.
    """
    from .logging import setup_logging

    manager = ConfigManager(filepath)

    def on_changed(section, key, value):
        if section == "logging":
            setup_logging(manager.data.logging)

    manager.on_changed.connect(on_changed)
    set_config(manager)
    setup_logging(manager.data.logging)
    return manager
