#!/usr/bin/env python3
"""
Configuration management for nodeflow.
Handles configuration storage, environment overrides and interactive prompts.
"""
import os
import json
import logging
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, asdict, field

logger = logging.getLogger(__name__)


@dataclass
class GeneratorConfig:
    """Configuration for the workflow generation service"""
    url: Optional[str] = None
    api_key: Optional[str] = None
    timeout: int = 60
    max_retries: int = 3


@dataclass
class ServerConfig:
    """Configuration for the HTTP service"""
    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class NodeflowConfig:
    """Main nodeflow configuration"""
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    log_level: str = "INFO"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "generator": asdict(self.generator),
            "server": asdict(self.server),
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NodeflowConfig":
        """Create from dictionary"""
        return cls(
            generator=GeneratorConfig(**data.get("generator", {})),
            server=ServerConfig(**data.get("server", {})),
            log_level=data.get("log_level", "INFO"),
        )


# Environment variable -> (section, field, type)
ENV_OVERRIDES = {
    "NODEFLOW_GENERATOR_URL": ("generator", "url", str),
    "NODEFLOW_GENERATOR_API_KEY": ("generator", "api_key", str),
    "NODEFLOW_HOST": ("server", "host", str),
    "NODEFLOW_PORT": ("server", "port", int),
    "NODEFLOW_LOG_LEVEL": (None, "log_level", str),
}


class ConfigManager:
    """Manages nodeflow configuration with interactive prompts"""

    CONFIG_FILE = Path.home() / ".nodeflow" / "config.json"

    def __init__(self, config_file: Optional[Path] = None):
        if config_file is not None:
            self.CONFIG_FILE = Path(config_file)
        self.config: Optional[NodeflowConfig] = None
        self._ensure_config_dir()

    def _ensure_config_dir(self):
        """Ensure config directory exists"""
        self.CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        # Set restrictive permissions
        self.CONFIG_FILE.parent.chmod(0o700)

    def load(self) -> NodeflowConfig:
        """Load configuration from file, then apply environment overrides"""
        self.config = NodeflowConfig()
        if self.CONFIG_FILE.exists():
            try:
                with open(self.CONFIG_FILE, 'r') as f:
                    data = json.load(f)
                self.config = NodeflowConfig.from_dict(data)
            except (OSError, ValueError, TypeError) as e:
                logger.warning("Could not load config file %s: %s", self.CONFIG_FILE, e)

        self._apply_env(self.config)
        return self.config

    def _apply_env(self, config: NodeflowConfig):
        for name, (section, attr, cast) in ENV_OVERRIDES.items():
            raw = os.environ.get(name)
            if not raw:
                continue
            try:
                value = cast(raw)
            except ValueError:
                logger.warning("Ignoring invalid value for %s: %r", name, raw)
                continue
            target = getattr(config, section) if section else config
            setattr(target, attr, value)

    def save(self, config: Optional[NodeflowConfig] = None):
        """Save configuration to file"""
        if config:
            self.config = config

        if not self.config:
            return

        try:
            with open(self.CONFIG_FILE, 'w') as f:
                json.dump(self.config.to_dict(), f, indent=2)
            # Set restrictive permissions
            self.CONFIG_FILE.chmod(0o600)
        except OSError as e:
            logger.warning("Could not save config file %s: %s", self.CONFIG_FILE, e)

    def get_generator_config(self, prompt: bool = True) -> GeneratorConfig:
        """Get generator configuration, prompting for the endpoint if needed"""
        config = self.load()

        if not config.generator.url and prompt:
            print("\n" + "=" * 60)
            print("Workflow Generator Configuration")
            print("=" * 60)
            url = input("Generator endpoint URL (e.g., http://localhost:3000/api/generate-workflow): ").strip()
            if url:
                config.generator.url = url
                self.save(config)

        return config.generator


# Global instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get global config manager instance"""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
