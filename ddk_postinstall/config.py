"""
Build-time configuration.

Two sources, both read once at startup:
  - the process environment + host platform, captured into an Environment snapshot
  - ddk.build.yaml in the package root (optional)
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path

import yaml

BUILD_CONFIG_NAME = "ddk.build.yaml"

# Either one enables the Android build
NDK_VARS = ("ANDROID_NDK_ROOT", "NDK_HOME")

# Build toggles accepted in ddk.build.yaml
PLATFORMS = ("ios", "android")


@dataclass(frozen=True)
class Environment:
    ci: bool
    build_native_libs: bool
    ndk_present: bool
    platform: str

    @property
    def is_macos(self) -> bool:
        return self.platform == "darwin"

    @property
    def skip_in_ci(self) -> bool:
        return self.ci and not self.build_native_libs

    @classmethod
    def capture(cls, environ=None, platform=None) -> "Environment":
        """Snapshot the variables the install cares about. Empty values count as unset."""
        environ = os.environ if environ is None else environ
        return cls(
            ci=bool(environ.get("CI")),
            build_native_libs=bool(environ.get("BUILD_NATIVE_LIBS")),
            ndk_present=any(environ.get(name) for name in NDK_VARS),
            platform=platform or sys.platform,
        )


def load_build_config(root: Path) -> dict:
    """Load ddk.build.yaml. Returns empty dict if absent."""
    path = root / BUILD_CONFIG_NAME
    if not path.exists():
        return {}
    config = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(config, dict):
        raise ValueError(f"{BUILD_CONFIG_NAME} must be a mapping, got {type(config).__name__}")
    for name in PLATFORMS:
        if name in config and not isinstance(config[name], bool):
            raise ValueError(f"{BUILD_CONFIG_NAME}: '{name}' must be true or false, got {config[name]!r}")
    return config


def platform_enabled(build_cfg: dict, name: str) -> bool:
    return bool(build_cfg.get(name, True))
