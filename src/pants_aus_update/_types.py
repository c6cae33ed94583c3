"""Domain types for AUS update manifest generation."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from pants.util.frozendict import FrozenDict

from pants_aus_update._exceptions import AusConfigurationError


class TargetOS(str, Enum):
    """Operating systems the browser is built and updated for."""

    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"

    @classmethod
    def parse(cls, value: str) -> "TargetOS":
        """Parse an os name, accepting the ``sys.platform`` style aliases too."""
        normalized = value.strip().lower()
        if normalized in _OS_ALIASES:
            return _OS_ALIASES[normalized]
        raise AusConfigurationError(
            "target_os", value, choices=[member.value for member in cls]
        )

    @classmethod
    def host(cls) -> Optional["TargetOS"]:
        try:
            return cls.parse(sys.platform)
        except AusConfigurationError:
            return None


_OS_ALIASES = {
    "windows": TargetOS.WINDOWS,
    "win32": TargetOS.WINDOWS,
    "linux": TargetOS.LINUX,
    "macos": TargetOS.MACOS,
    "darwin": TargetOS.MACOS,
}


class CompatMode(str, Enum):
    """CPU compatibility tier of a build."""

    X86_64 = "x86_64"
    X86_64_V3 = "x86_64-v3"
    AARCH64 = "aarch64"

    @classmethod
    def parse(cls, value: str) -> "CompatMode":
        try:
            return cls(value.strip())
        except ValueError:
            raise AusConfigurationError(
                "compat_mode", value, choices=[member.value for member in cls]
            ) from None


@dataclass(frozen=True)
class GithubRepo:
    """A GitHub repository hosting release binaries, as ``owner/name``."""

    repo: str


@dataclass(frozen=True)
class ReleaseInfo:
    """Release metadata for one brand (channel)."""

    display_version: str
    archives: FrozenDict[str, str] = FrozenDict()
    github: Optional[GithubRepo] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ReleaseInfo":
        """Build from the ``release`` block of a brand config.

        Accepts both the camelCase keys of the JSON brand config
        (``displayVersion``) and snake_case keys.
        """
        display_version = data.get("displayVersion", data.get("display_version"))
        if not display_version:
            raise AusConfigurationError("release.displayVersion", str(display_version))

        github_data = data.get("github")
        github = None
        if github_data:
            repo = github_data.get("repo") if isinstance(github_data, Mapping) else github_data
            if repo and str(repo).strip():
                github = GithubRepo(repo=str(repo).strip())

        return cls(
            display_version=str(display_version),
            archives=FrozenDict(data.get("archives") or {}),
            github=github,
        )
