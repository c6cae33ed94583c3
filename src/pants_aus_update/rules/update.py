"""Update plan rule: aus_release target + [aus-update] options -> AusUpdatePlan."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pants.engine.rules import collect_rules, rule
from pants.engine.target import FieldSet

from pants_aus_update._generate import AusUpdateSettings
from pants_aus_update._types import ReleaseInfo
from pants_aus_update.subsystem import AusUpdateSubsystem
from pants_aus_update.targets import (
    ArchivesField,
    ChannelField,
    DisplayVersionField,
    GithubRepoField,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Request / Result types
# =============================================================================


@dataclass(frozen=True)
class AusReleaseFieldSet(FieldSet):
    """Fields required to generate update files from an aus_release target."""

    required_fields = (ChannelField, DisplayVersionField)

    channel: ChannelField
    display_version: DisplayVersionField
    archives: ArchivesField
    github_repo: GithubRepoField


@dataclass(frozen=True)
class AusUpdateRequest:
    field_set: AusReleaseFieldSet


@dataclass(frozen=True)
class AusUpdatePlan:
    """Everything needed to write the update files of one release."""

    settings: AusUpdateSettings
    release: ReleaseInfo


# =============================================================================
# Rules
# =============================================================================


def release_info_from_fields(display_version, archives, github_repo) -> ReleaseInfo:
    return ReleaseInfo.from_dict(
        {
            "displayVersion": display_version,
            "archives": dict(archives or {}),
            "github": {"repo": github_repo} if github_repo else None,
        }
    )


@rule(desc="Resolve AUS update plan")
async def resolve_update_plan(
    request: AusUpdateRequest,
    subsystem: AusUpdateSubsystem,
) -> AusUpdatePlan:
    fs = request.field_set

    release = release_info_from_fields(
        fs.display_version.value, fs.archives.value, fs.github_repo.value
    )

    settings = AusUpdateSettings.from_options(
        channel=fs.channel.value,
        compat_mode=subsystem.compat_mode,
        target_os=subsystem.target_os,
        platform_version=subsystem.platform_version,
        update_root=subsystem.update_root,
        obj_dir=subsystem.obj_dir,
        binary_name=subsystem.binary_name,
        update_hostname=subsystem.update_hostname,
        preview_channel=subsystem.preview_channel,
    )

    logger.info(
        "Resolved AUS update plan for channel %s version %s (%s, %s)",
        settings.channel,
        release.display_version,
        settings.target_os.value,
        settings.compat_mode.value,
    )

    return AusUpdatePlan(settings=settings, release=release)


def rules():
    return collect_rules()
