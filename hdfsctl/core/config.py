"""Configuration management for hdfsctl.

Supports YAML profiles and environment variable overrides.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from hdfsctl.core.exceptions import ConfigurationError, ProfileNotFoundError

# =============================================================================
# Constants
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "hdfsctl"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

DEFAULT_TIMEOUT = 30

# Environment variable names
ENV_URL = "HDFS_URL"
ENV_USER = "HDFS_USER"
ENV_PROFILE = "HDFS_PROFILE"
ENV_VERIFY_SSL = "HDFS_VERIFY_SSL"
ENV_TIMEOUT = "HDFS_TIMEOUT"


# =============================================================================
# ConnectionConfig
# =============================================================================


@dataclass(frozen=True)
class ConnectionConfig:
    """Where to write and who to write as."""

    filesystem_uri: str
    username: str


# =============================================================================
# Profile
# =============================================================================


@dataclass
class Profile:
    """Configuration profile for an HDFS endpoint."""

    url: str
    user: str = ""
    verify_ssl: bool = True
    timeout: int = DEFAULT_TIMEOUT

    def connection(self) -> ConnectionConfig:
        """Build the connection settings for this profile.

        Raises:
            ConfigurationError: If url or user is missing.
        """
        if not self.url:
            raise ConfigurationError("Profile has no url", field="url")
        if not self.user:
            raise ConfigurationError("Profile has no user", field="user")
        return ConnectionConfig(filesystem_uri=self.url, username=self.user)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "url": self.url,
            "user": self.user,
            "verify_ssl": self.verify_ssl,
            "timeout": self.timeout,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Profile":
        """Create from dictionary."""
        return cls(
            url=data.get("url", ""),
            user=data.get("user", ""),
            verify_ssl=data.get("verify_ssl", True),
            timeout=data.get("timeout", DEFAULT_TIMEOUT),
        )


# =============================================================================
# Config
# =============================================================================


@dataclass
class Config:
    """Application configuration."""

    default_profile: str = "default"
    profiles: dict[str, Profile] = field(default_factory=dict)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """Load config from file with environment variable overrides.

        Priority (highest to lowest):
        1. Environment variables
        2. Config file
        3. Defaults

        Args:
            config_path: Optional path to config file.

        Returns:
            Loaded configuration.
        """
        path = config_path or CONFIG_FILE
        config = cls()

        if path.exists():
            try:
                with open(path) as f:
                    data = yaml.safe_load(f) or {}

                config.default_profile = data.get("default_profile", "default")

                for name, pdata in (data.get("profiles") or {}).items():
                    config.profiles[name] = Profile.from_dict(pdata or {})
            except (OSError, yaml.YAMLError, AttributeError) as e:
                raise ConfigurationError(f"Failed to load config: {e}")

        # Environment variable overrides
        if url := os.getenv(ENV_URL):
            verify_ssl = os.getenv(ENV_VERIFY_SSL, "true").lower() in ("true", "1", "yes")
            try:
                timeout = int(os.getenv(ENV_TIMEOUT, str(DEFAULT_TIMEOUT)))
            except ValueError:
                raise ConfigurationError(
                    "Invalid timeout", field=ENV_TIMEOUT, value=os.getenv(ENV_TIMEOUT)
                )

            config.profiles["default"] = Profile(
                url=url,
                user=os.getenv(ENV_USER, ""),
                verify_ssl=verify_ssl,
                timeout=timeout,
            )
        elif user := os.getenv(ENV_USER):
            for profile in config.profiles.values():
                profile.user = user

        if profile_name := os.getenv(ENV_PROFILE):
            config.default_profile = profile_name

        return config

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save config to file.

        Args:
            config_path: Optional path to config file.
        """
        path = config_path or CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "default_profile": self.default_profile,
            "profiles": {name: p.to_dict() for name, p in self.profiles.items()},
        }

        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    def get_profile(self, name: Optional[str] = None) -> Profile:
        """Get profile by name or default.

        Raises:
            ProfileNotFoundError: If profile doesn't exist.
        """
        name = name or self.default_profile
        if name not in self.profiles:
            raise ProfileNotFoundError(name)
        return self.profiles[name]

    def has_profile(self, name: str) -> bool:
        """Check if profile exists."""
        return name in self.profiles

    def add_profile(
        self,
        name: str,
        url: str,
        user: str,
        verify_ssl: bool = True,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> Profile:
        """Add or update a profile."""
        profile = Profile(url=url, user=user, verify_ssl=verify_ssl, timeout=timeout)
        self.profiles[name] = profile
        return profile
