"""Generate browser update.xml files for every AUS platform of a build.

Pure Python entry point used by the aus-update goal. All build configuration
is passed in through AusUpdateSettings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pants_aus_update._artifact import file_size, hash_file
from pants_aus_update._exceptions import AusConfigurationError, MissingArtifactError
from pants_aus_update._platform_ini import (
    find_platform_ini,
    platform_ini_candidates,
    read_platform_ini,
)
from pants_aus_update._platforms import aus_platforms_for, channel_suffix
from pants_aus_update._publisher import (
    PublishReport,
    publish_update_manifests,
    validate_channel,
)
from pants_aus_update._release_url import (
    DEFAULT_PREVIEW_CHANNEL,
    resolve_distribution_url,
)
from pants_aus_update._types import CompatMode, ReleaseInfo, TargetOS
from pants_aus_update._update_manifest import HASH_FUNCTION, assemble_update_manifest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AusUpdateSettings:
    """Build configuration needed to generate update files."""

    channel: str
    compat_mode: CompatMode
    target_os: TargetOS
    platform_version: str
    update_root: str
    obj_dir: str
    binary_name: str
    update_hostname: Optional[str] = None
    preview_channel: str = DEFAULT_PREVIEW_CHANNEL

    @classmethod
    def from_options(
        cls,
        *,
        channel: str,
        compat_mode: str,
        target_os: str,
        platform_version: str,
        update_root: str,
        obj_dir: str,
        binary_name: str,
        update_hostname: str = "",
        preview_channel: str = "",
    ) -> "AusUpdateSettings":
        """Validate raw option strings. Empty ``target_os`` means the host os.

        Raises:
            AusConfigurationError: a value is unknown, or the channel is not
                usable as a directory name.
        """
        if target_os:
            resolved_os = TargetOS.parse(target_os)
        else:
            host = TargetOS.host()
            if host is None:
                raise AusConfigurationError(
                    "[aus-update].target_os",
                    target_os,
                    choices=[member.value for member in TargetOS],
                )
            resolved_os = host

        if not platform_version:
            raise AusConfigurationError("[aus-update].platform_version", platform_version)

        return cls(
            channel=validate_channel(channel),
            compat_mode=CompatMode.parse(compat_mode),
            target_os=resolved_os,
            platform_version=platform_version,
            update_root=update_root,
            obj_dir=obj_dir,
            binary_name=binary_name,
            update_hostname=update_hostname or None,
            preview_channel=preview_channel or DEFAULT_PREVIEW_CHANNEL,
        )


def generate_browser_update_files(
    settings: AusUpdateSettings,
    release: ReleaseInfo,
    mar_path: Optional[str],
) -> PublishReport:
    """Write update.xml for each AUS platform of ``settings.target_os``.

    Every configuration problem is raised before the first file is written.
    Write failures are collected in the returned report.

    Raises:
        MissingArtifactError: no mar has been built.
        UndefinedSuffixError: the os/compat mode pair has no channel directory.
        PlatformIniNotFoundError: platform.ini is missing.
        PlatformIniParseError: platform.ini is malformed.
        MissingBuildIdError: platform.ini has no BuildID.
        UnsafeUpdatePathError: an update directory escapes its platform directory.
    """
    logger.info("Creating browser AUS update files")

    if not mar_path or not mar_path.strip():
        raise MissingArtifactError(None)
    if not Path(mar_path).is_file():
        raise MissingArtifactError(mar_path)

    suffix = channel_suffix(settings.target_os, settings.compat_mode)

    # AUS uses the hash to make sure the mar was not modified on the
    # distribution server.
    hash_value = hash_file(mar_path, HASH_FUNCTION)
    size = file_size(mar_path)

    platform_ini = find_platform_ini(
        platform_ini_candidates(settings.obj_dir, settings.binary_name)
    )
    platform_info = read_platform_ini(platform_ini)

    artifact_url = resolve_distribution_url(
        settings.target_os,
        settings.compat_mode,
        release,
        channel=settings.channel,
        update_hostname=settings.update_hostname,
        preview_channel=settings.preview_channel,
    )

    manifest = assemble_update_manifest(
        release=release,
        platform_info=platform_info,
        artifact_url=artifact_url,
        hash_value=hash_value,
        size=size,
        platform_version=settings.platform_version,
    )

    aus_platforms = aus_platforms_for(settings.target_os)
    report = publish_update_manifests(
        manifest,
        aus_platforms,
        update_root=settings.update_root,
        channel=settings.channel,
        suffix=suffix,
    )

    logger.info(
        "Wrote %d of %d update files for %s (%s)",
        len(report.written),
        len(aus_platforms),
        settings.target_os.value,
        settings.compat_mode.value,
    )
    return report
