"""Application configuration loaded from an optional config.yaml and the environment."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import ClassVar

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from idleview.settings.paths import default_settings_path

# Load environment variables from .env file(s)
load_dotenv()

DEFAULT_PORT = 8737


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


def _env_port() -> int:
    return int(os.environ.get("IDLEVIEW_PORT", DEFAULT_PORT))


class AppConfig(BaseModel):
    """Process-level configuration of the idleview server.

    Unlike the settings document, these values are not editable through
    the API. Environment variables supply the defaults; a YAML file may
    override them.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("idleview.yaml"),
        Path("~/.config/idleview/config.yaml").expanduser(),
        Path("/etc/idleview/config.yaml"),
    ]

    host: str = Field(
        default_factory=lambda: os.environ.get("IDLEVIEW_HOST", "0.0.0.0"),
        description="Interface the HTTP server binds to",
    )
    port: int = Field(default_factory=_env_port, gt=0, le=65535, description="HTTP port")
    settings_path: Path | None = Field(
        None, description="settings.json location (platform default if null)"
    )
    static_dir: Path | None = Field(
        None, description="Directory with the remote control page served at /"
    )
    unsplash_access_key: str | None = Field(
        default_factory=lambda: os.environ.get("UNSPLASH_ACCESS_KEY"),
        description="Unsplash API access key",
    )
    request_timeout: float = Field(10.0, gt=0, description="Provider request timeout (seconds)")
    debug: bool = False

    def resolve_settings_path(self) -> Path:
        """Return the configured settings path or the platform default."""
        if self.settings_path is not None:
            return self.settings_path.expanduser()
        return default_settings_path()

    @property
    def unsplash_key_source(self) -> str:
        """Where the Unsplash key came from: "Runtime env", "Config" or "None"."""
        if not self.unsplash_access_key:
            return "None"
        if self.unsplash_access_key == os.environ.get("UNSPLASH_ACCESS_KEY"):
            return "Runtime env"
        return "Config"

    @classmethod
    def load(cls, path: Path | None = None) -> AppConfig:
        """Load configuration, falling back to environment-only defaults.

        Args:
            path: Path to a YAML config file (optional; ``IDLEVIEW_CONFIG``
                and the default locations are searched if None)

        Returns:
            Validated AppConfig object

        Raises:
            FileNotFoundError: If an explicitly named config file is missing
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        if path is None:
            env_path = os.environ.get("IDLEVIEW_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(f"Config file from IDLEVIEW_CONFIG not found: {path}")
            else:
                path = next((p for p in cls.DEFAULT_CONFIG_PATHS if p.exists()), None)
        elif not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        data: dict = {}
        if path is not None:
            try:
                raw = _interpolate_env(path.read_text())
                data = yaml.safe_load(raw) or {}
            except (OSError, yaml.YAMLError) as exc:
                raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
