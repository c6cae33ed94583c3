"""AUS update target types for Pants BUILD files.

Provides:
  - aus_release: release metadata of one browser brand (update channel)
"""

from __future__ import annotations

from pants.engine.target import (
    COMMON_TARGET_FIELDS,
    DictStringToStringField,
    StringField,
    Target,
)
from pants.util.strutil import softwrap


# =============================================================================
# Release fields
# =============================================================================


class ChannelField(StringField):
    alias = "channel"
    required = True
    help = softwrap(
        """
        Brand / update channel name (e.g., 'release', 'beta', 'twilight').
        Used as the update directory name and, for the rolling preview channel,
        as the GitHub release tag.
        """
    )


class DisplayVersionField(StringField):
    alias = "display_version"
    required = True
    help = "User visible version of the release (e.g., '1.2.3b')."


class ArchivesField(DictStringToStringField):
    alias = "archives"
    help = softwrap(
        """
        Mapping of build flavour to the mar archive published for it.
        Recognised keys: windows, windows-compat, windows-arm64, linux,
        linux-compat, linux-aarch64, macos-x86_64, macos-aarch64.

        Example: {'linux': 'browser.linux.mar', 'linux-compat': 'browser.linux-generic.mar'}
        """
    )


class GithubRepoField(StringField):
    alias = "github_repo"
    default = None
    help = softwrap(
        """
        GitHub repository (owner/repo) whose releases host the mar archives.
        When unset the archives are expected on [aus-update].update_hostname.
        """
    )


# =============================================================================
# Target
# =============================================================================


class AusReleaseTarget(Target):
    alias = "aus_release"
    help = softwrap(
        """
        Release metadata used to generate browser AUS update.xml files.

        Example:

            aus_release(
                name="release",
                channel="release",
                display_version="1.2.3b",
                github_repo="example/browser",
                archives={
                    "linux": "browser.linux.mar",
                    "linux-compat": "browser.linux-generic.mar",
                },
            )
        """
    )
    core_fields = (
        *COMMON_TARGET_FIELDS,
        ChannelField,
        DisplayVersionField,
        ArchivesField,
        GithubRepoField,
    )
