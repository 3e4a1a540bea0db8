"""
Central configuration for the draughts engine and console front end.
Pydantic models give type-safe settings loaded from env vars or JSON.
"""
from __future__ import annotations

import os
import logging
import sys
from typing import Dict, Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class UISettings(BaseModel):
    """Console display settings."""

    model_config = ConfigDict(validate_assignment=True)

    use_color: bool = Field(default=True, description="Enable colored terminal output")
    use_unicode: bool = Field(default=False, description="Use Unicode glyphs for pieces")
    show_coordinates: bool = Field(default=True, description="Show file letters and rank digits")


class EngineSettings(BaseModel):
    """Move enumeration settings."""

    model_config = ConfigDict(validate_assignment=True)

    max_workers: Optional[int] = Field(default=None, ge=1, le=64,
                                       description="Upper bound on concurrent scan workers (None = CPU count)")
    worker_backend: str = Field(default="thread", description="Worker pool kind: thread or process")

    @field_validator('worker_backend', mode='before')
    @classmethod
    def validate_backend(cls, v):
        v_lower = str(v).lower()
        if v_lower not in ('thread', 'process'):
            raise ValueError("worker_backend must be 'thread' or 'process'")
        return v_lower


class PlaySettings(BaseModel):
    """Console game settings."""

    model_config = ConfigDict(validate_assignment=True)

    human_side: str = Field(default="light", description="Side played by the human: light, dark or none")
    seed: Optional[int] = Field(default=None, description="Seed for the computer's random choices")
    max_turns: int = Field(default=0, ge=0, description="Stop after this many turns (0 = unlimited)")
    show_rules: bool = Field(default=True, description="Print the rules before the first turn")

    @field_validator('human_side', mode='before')
    @classmethod
    def validate_side(cls, v):
        v_lower = str(v).lower()
        if v_lower not in ('light', 'dark', 'none'):
            raise ValueError("human_side must be one of light, dark, none")
        return v_lower


class LoggingSettings(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(validate_assignment=True)

    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_to_file: bool = Field(default=False, description="Write logs to file")
    log_file_path: str = Field(default="draughts.log", description="Log file path")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
        v_upper = v.upper() if isinstance(v, str) else str(v).upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper


class DraughtsConfig(BaseModel):
    """Main configuration model for the draughts engine."""

    ui: UISettings = Field(default_factory=UISettings)
    engine: EngineSettings = Field(default_factory=EngineSettings)
    play: PlaySettings = Field(default_factory=PlaySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Metadata
    version: str = Field(default="1.0.0", description="Configuration version")
    config_file: Optional[str] = Field(default=None, description="Path to config file")

    def __init__(self, **data):
        super().__init__(**data)
        # Auto-detect terminal capabilities; copy so the caller's UISettings stays untouched
        try:
            tty = sys.stdout.isatty()
        except (AttributeError, OSError):
            tty = False
        if not tty and self.ui.use_color:
            self.ui = self.ui.model_copy(update={"use_color": False})

    @classmethod
    def from_env(cls) -> 'DraughtsConfig':
        """Create configuration from environment variables."""
        max_workers = os.getenv('DRAUGHTS_MAX_WORKERS')
        seed = os.getenv('DRAUGHTS_SEED')
        return cls(
            ui=UISettings(
                use_color=os.getenv('DRAUGHTS_COLOR', 'true').lower() == 'true',
                use_unicode=os.getenv('DRAUGHTS_UNICODE', 'false').lower() == 'true',
            ),
            engine=EngineSettings(
                max_workers=int(max_workers) if max_workers else None,
                worker_backend=os.getenv('DRAUGHTS_BACKEND', 'thread'),
            ),
            play=PlaySettings(
                human_side=os.getenv('DRAUGHTS_SIDE', 'light'),
                seed=int(seed) if seed else None,
            ),
            logging=LoggingSettings(
                log_level=os.getenv('DRAUGHTS_LOG_LEVEL', 'INFO'),
                log_to_file=os.getenv('DRAUGHTS_LOG_FILE', 'false').lower() == 'true',
            )
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'ui': self.ui.model_dump(),
            'engine': self.engine.model_dump(),
            'play': self.play.model_dump(),
            'logging': self.logging.model_dump(),
            'version': self.version,
            'config_file': self.config_file,
        }

    def save_to_file(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        import json
        config_dict = self.to_dict()
        config_dict['config_file'] = filepath

        with open(filepath, 'w') as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str) -> 'DraughtsConfig':
        """Load configuration from JSON file."""
        import json

        with open(filepath, 'r') as f:
            data = json.load(f)

        return cls(
            ui=UISettings(**data.get('ui', {})),
            engine=EngineSettings(**data.get('engine', {})),
            play=PlaySettings(**data.get('play', {})),
            logging=LoggingSettings(**data.get('logging', {})),
            version=data.get('version', '1.0.0'),
            config_file=filepath,
        )

    def update_from_dict(self, updates: Dict[str, Any]) -> None:
        """Update configuration from dictionary."""
        for section, settings in updates.items():
            if hasattr(self, section) and isinstance(settings, dict):
                section_model = getattr(self, section)
                for key, value in settings.items():
                    if hasattr(section_model, key):
                        setattr(section_model, key, value)


# Global configuration instance
_config: Optional[DraughtsConfig] = None


def get_config() -> DraughtsConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = DraughtsConfig.from_env()
    return _config


def load_config_from_file(filepath: str) -> DraughtsConfig:
    """Load configuration from file and update global instance."""
    global _config
    _config = DraughtsConfig.load_from_file(filepath)
    return _config


def reset_config() -> None:
    """Reset the global configuration to defaults."""
    global _config
    _config = None


# Convenience functions for common configuration access
def get_ui_settings() -> UISettings:
    return get_config().ui


def get_engine_settings() -> EngineSettings:
    return get_config().engine


def get_play_settings() -> PlaySettings:
    return get_config().play


def get_logging_settings() -> LoggingSettings:
    return get_config().logging


# Logging level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("DRAUGHTS_LOG_LEVEL", "INFO").upper()


def setup_logging(settings: Optional[LoggingSettings] = None) -> None:
    """Configure root logging once, from settings or env var DRAUGHTS_LOG_LEVEL."""
    if getattr(setup_logging, "_configured", False):
        return
    level_name: str = settings.log_level if settings is not None else LOG_LEVEL
    level: int = getattr(logging, level_name, logging.INFO)
    handlers = [logging.StreamHandler()]
    if settings is not None and settings.log_to_file:
        handlers.append(logging.FileHandler(settings.log_file_path))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
