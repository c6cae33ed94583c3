"""Resolve where the complete mar archive is downloaded from.

Two distribution strategies are supported:

    self-hosted      https://<update-hostname>/<archive>
    GitHub releases  https://github.com/<repo>/releases/download/<tag>/<archive>

The tag is the release display version, except for the rolling preview
channel which always publishes under a tag named after the channel.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from pants_aus_update._platforms import coerce_mode, coerce_os
from pants_aus_update._types import CompatMode, ReleaseInfo, TargetOS

logger = logging.getLogger(__name__)

DEFAULT_UPDATE_HOSTNAME = "localhost:8000"
DEFAULT_ARCHIVE_NAME = "output.mar"
DEFAULT_PREVIEW_CHANNEL = "twilight"

# Key into ReleaseInfo.archives for each build flavour.
ARCHIVE_KEYS: dict[tuple[TargetOS, CompatMode], str] = {
    (TargetOS.WINDOWS, CompatMode.X86_64): "windows-compat",
    (TargetOS.WINDOWS, CompatMode.X86_64_V3): "windows",
    (TargetOS.WINDOWS, CompatMode.AARCH64): "windows-arm64",
    (TargetOS.LINUX, CompatMode.X86_64): "linux-compat",
    (TargetOS.LINUX, CompatMode.X86_64_V3): "linux",
    (TargetOS.LINUX, CompatMode.AARCH64): "linux-aarch64",
    (TargetOS.MACOS, CompatMode.X86_64): "macos-x86_64",
    (TargetOS.MACOS, CompatMode.AARCH64): "macos-aarch64",
}


def archive_key(
    target_os: Union[TargetOS, str, None],
    compat_mode: Union[CompatMode, str, None],
) -> Optional[str]:
    return ARCHIVE_KEYS.get((coerce_os(target_os), coerce_mode(compat_mode)))


def release_archive_name(
    release: ReleaseInfo,
    target_os: Union[TargetOS, str, None],
    compat_mode: Union[CompatMode, str, None],
) -> Optional[str]:
    """Look up the archive published for this build, or None if unknown."""
    if not release.archives:
        logger.error("No archives found in the release information")
        return None

    key = archive_key(target_os, compat_mode)
    if key is None:
        logger.warning(
            "No release archive is defined for target os %s with compat mode %s",
            getattr(target_os, "value", target_os),
            getattr(compat_mode, "value", compat_mode),
        )
        return None

    name = release.archives.get(key)
    if name is None or not name.strip():
        logger.warning("Release archives have no entry for %r", key)
        return None
    return name


# =============================================================================
# Distribution strategies
# =============================================================================


@dataclass(frozen=True)
class SelfHostedDistribution:
    """Archives served straight from the update server."""

    hostname: str = DEFAULT_UPDATE_HOSTNAME

    def artifact_url(
        self,
        archive_name: Optional[str],
        *,
        release: ReleaseInfo,
        channel: str,
        preview_channel: str,
    ) -> str:
        return f"https://{self.hostname}/{archive_name or DEFAULT_ARCHIVE_NAME}"


@dataclass(frozen=True)
class GithubReleaseDistribution:
    """Archives attached as assets to GitHub releases."""

    repo: str
    host: str = "github.com"

    def release_tag(self, release: ReleaseInfo, channel: str, preview_channel: str) -> str:
        if channel == preview_channel:
            return preview_channel
        return release.display_version

    def artifact_url(
        self,
        archive_name: Optional[str],
        *,
        release: ReleaseInfo,
        channel: str,
        preview_channel: str,
    ) -> str:
        tag = self.release_tag(release, channel, preview_channel)
        return (
            f"https://{self.host}/{self.repo}/releases/download/"
            f"{tag}/{archive_name or DEFAULT_ARCHIVE_NAME}"
        )


DistributionStrategy = Union[SelfHostedDistribution, GithubReleaseDistribution]


def distribution_for(
    release: ReleaseInfo, update_hostname: Optional[str] = None
) -> DistributionStrategy:
    if release.github is not None and release.github.repo.strip():
        return GithubReleaseDistribution(repo=release.github.repo)
    return SelfHostedDistribution(hostname=update_hostname or DEFAULT_UPDATE_HOSTNAME)


def resolve_distribution_url(
    target_os: Union[TargetOS, str, None],
    compat_mode: Union[CompatMode, str, None],
    release: ReleaseInfo,
    *,
    channel: str,
    update_hostname: Optional[str] = None,
    preview_channel: str = DEFAULT_PREVIEW_CHANNEL,
) -> str:
    """Return the URL the update client should download the mar from."""
    archive_name = release_archive_name(release, target_os, compat_mode)
    strategy = distribution_for(release, update_hostname)
    url = strategy.artifact_url(
        archive_name,
        release=release,
        channel=channel,
        preview_channel=preview_channel,
    )

    if isinstance(strategy, GithubReleaseDistribution):
        logger.info("Using '%s' as the distribution url", url)
    else:
        logger.warning(
            'No release information found! Default release location will be "%s"',
            url,
        )
    return url
