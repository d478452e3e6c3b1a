"""Global configuration data structures and loading.

Provides immutable global config data loaded from ~/.ghi/config.toml.
A missing file is equivalent to an empty one: every key has a default.
"""

import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import tomlkit

from ghi.core.repo import DEFAULT_HOST

CONFIG_KEYS = ("host", "prompts_enabled")


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in GhiContext.
    """

    host: str = DEFAULT_HOST
    prompts_enabled: bool = True


def parse_boolean_value(value: str, field_name: str) -> bool:
    """Parse "true"/"false" (case-insensitive).

    Raises:
        ValueError: If the value is not a boolean literal
    """
    if value.lower() not in ("true", "false"):
        msg = f"Invalid boolean value for {field_name}: {value}"
        raise ValueError(msg)
    return value.lower() == "true"


def config_from_mapping(data: dict[str, object], source: str) -> GlobalConfig:
    """Build GlobalConfig from parsed TOML data.

    Raises:
        ValueError: If a key has the wrong type
    """
    host = data.get("host", DEFAULT_HOST)
    if not isinstance(host, str) or not host:
        msg = f"Invalid 'host' in {source}: expected a non-empty string"
        raise ValueError(msg)

    prompts_enabled = data.get("prompts_enabled", True)
    if not isinstance(prompts_enabled, bool):
        msg = f"Invalid 'prompts_enabled' in {source}: expected true or false"
        raise ValueError(msg)

    return GlobalConfig(host=host, prompts_enabled=prompts_enabled)


class ConfigStore(ABC):
    """Abstract interface for global config operations.

    Provides dependency injection for global config access, enabling
    in-memory implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if global config exists."""
        ...

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load global config, falling back to defaults when absent.

        Raises:
            ValueError: If config is malformed
        """
        ...

    @abstractmethod
    def save(self, config: GlobalConfig) -> None:
        """Persist global config."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the global config file (for messages)."""
        ...


class RealConfigStore(ConfigStore):
    """Production implementation that reads/writes ~/.ghi/config.toml."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path or Path.home() / ".ghi" / "config.toml"

    def exists(self) -> bool:
        return self._config_path.exists()

    def load(self) -> GlobalConfig:
        if not self._config_path.exists():
            return GlobalConfig()

        try:
            data = tomllib.loads(self._config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            msg = f"Malformed config at {self._config_path}: {e}"
            raise ValueError(msg) from e
        return config_from_mapping(data, str(self._config_path))

    def save(self, config: GlobalConfig) -> None:
        """Write config values, preserving comments and unknown keys in the file."""
        if self._config_path.exists():
            doc = tomlkit.parse(self._config_path.read_text(encoding="utf-8"))
        else:
            doc = tomlkit.document()
            doc.add(tomlkit.comment("Global ghi configuration"))

        doc["host"] = config.host
        doc["prompts_enabled"] = config.prompts_enabled

        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        self._config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")

    def path(self) -> Path:
        return self._config_path


class FakeConfigStore(ConfigStore):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: GlobalConfig | None = None) -> None:
        """Initialize in-memory config store.

        Args:
            config: Initial config state (None = config file doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> GlobalConfig:
        return self._config or GlobalConfig()

    def save(self, config: GlobalConfig) -> None:
        self._config = config

    def path(self) -> Path:
        return Path("/fake/ghi/config.toml")
