"""Configuration loader."""

import os
from pathlib import Path
from typing import List, Optional, Sequence

import yaml
from pydantic import ValidationError
from rich.console import Console

from .defaults import DEFAULT_SOURCES
from .models import ConfigModel, SourceConfig

console = Console(stderr=True)

CONFIG_ENV_VAR = "FEEDDIGEST_CONFIG"


def default_config_path() -> Path:
    """Return the config path, honouring ``FEEDDIGEST_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "feeddigest" / "config.yaml"


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        if config_path is None:
            config_path = default_config_path()
        self.config_path = config_path
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config, falling back to defaults when no file exists."""
        if self._config is None:
            if self.config_path.exists():
                self._config = load_config(self.config_path)
            else:
                self._config = ConfigModel()
        return self._config

    @property
    def sources_path(self) -> Optional[Path]:
        """Sources file to use instead of the embedded list, if any."""
        if self.config.sources_file:
            return Path(self.config.sources_file).expanduser()
        candidate = self.config_path.parent / "sources.yaml"
        if candidate.exists():
            return candidate
        return None

    def get_sources(self, sources_path: Optional[Path] = None) -> List[SourceConfig]:
        """Resolve the source list: explicit file, configured file, then embedded."""
        path = sources_path or self.sources_path
        if path is None:
            return list(DEFAULT_SOURCES)
        return load_sources(path)


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")


def load_sources(sources_path: Path) -> List[SourceConfig]:
    """Load sources from YAML file."""
    if not sources_path.exists():
        raise FileNotFoundError(f"Sources file not found: {sources_path}")

    try:
        with open(sources_path) as f:
            sources_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in sources file: {e}")

    if not isinstance(sources_data, dict) or "sources" not in sources_data:
        return []

    sources = []
    for source_data in sources_data["sources"] or []:
        try:
            sources.append(SourceConfig(**source_data))
        except (TypeError, ValidationError) as e:
            name = source_data.get("name", "unknown") if isinstance(source_data, dict) else "unknown"
            console.print(f"[yellow]Skipping invalid source {name}: {e}[/yellow]")

    return sources


def save_sources(sources: Sequence[SourceConfig], sources_path: Path) -> None:
    """Save sources to YAML file."""
    sources_path.parent.mkdir(parents=True, exist_ok=True)

    sources_data = {"sources": [s.model_dump() for s in sources]}

    with open(sources_path, "w") as f:
        yaml.dump(sources_data, f, default_flow_style=False, sort_keys=False)
