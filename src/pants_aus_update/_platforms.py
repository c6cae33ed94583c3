"""AUS platform catalog and channel directory naming (no Pants dependencies).

These are all of the platforms the update service deploys to, simplified to
the ones the browser actually ships for. The identifiers must match what the
update client reports, see mozrelease:

    python/mozrelease/mozrelease/platforms.py
    taskcluster/gecko_taskgraph/util/partials.py
"""

from __future__ import annotations

from typing import Optional, Union

from pants_aus_update._exceptions import AusConfigurationError, UndefinedSuffixError
from pants_aus_update._types import CompatMode, TargetOS

AUS_PLATFORMS: dict[TargetOS, tuple[str, ...]] = {
    TargetOS.WINDOWS: (
        "WINNT_x86_64-msvc",
        "WINNT_x86_64-msvc-x64",
        "WINNT_aarch64-msvc-aarch64",
    ),
    TargetOS.LINUX: (
        "Linux_x86_64-gcc3",
        "Linux-aarch64-gcc3",
    ),
    TargetOS.MACOS: (
        "Darwin_x86_64-gcc3-u-i386-x86_64",
        "Darwin_x86-gcc3-u-i386-x86_64",
        "Darwin_x86-gcc3",
        "Darwin_x86_64-gcc3",
        "Darwin_aarch64-gcc3",
    ),
}

# Appended to the channel name to form the update directory,
# e.g. "release-generic" for baseline x86_64 builds.
CHANNEL_SUFFIXES: dict[tuple[TargetOS, CompatMode], str] = {
    (TargetOS.WINDOWS, CompatMode.X86_64): "-generic",
    (TargetOS.WINDOWS, CompatMode.X86_64_V3): "",
    (TargetOS.WINDOWS, CompatMode.AARCH64): "-aarch64",
    (TargetOS.LINUX, CompatMode.X86_64): "-generic",
    (TargetOS.LINUX, CompatMode.X86_64_V3): "",
    (TargetOS.LINUX, CompatMode.AARCH64): "-aarch64",
    (TargetOS.MACOS, CompatMode.X86_64): "-generic",
    (TargetOS.MACOS, CompatMode.AARCH64): "",
}


def coerce_os(target_os: Union[TargetOS, str, None]) -> Optional[TargetOS]:
    if target_os is None or isinstance(target_os, TargetOS):
        return target_os
    try:
        return TargetOS.parse(target_os)
    except AusConfigurationError:
        return None


def coerce_mode(compat_mode: Union[CompatMode, str, None]) -> Optional[CompatMode]:
    if compat_mode is None or isinstance(compat_mode, CompatMode):
        return compat_mode
    try:
        return CompatMode.parse(compat_mode)
    except AusConfigurationError:
        return None


def aus_platforms_for(target_os: Union[TargetOS, str, None]) -> tuple[str, ...]:
    """Return the AUS platform identifiers an update must be written for.

    Anything that is not a known os gets the macOS identifiers.
    """
    resolved = coerce_os(target_os)
    if resolved is None:
        return AUS_PLATFORMS[TargetOS.MACOS]
    return AUS_PLATFORMS[resolved]


def channel_suffix(
    target_os: Union[TargetOS, str, None],
    compat_mode: Union[CompatMode, str, None],
) -> str:
    """Return the suffix appended to the channel directory name.

    Raises:
        UndefinedSuffixError: the pair has no directory naming convention.
    """
    key = (coerce_os(target_os), coerce_mode(compat_mode))
    if key not in CHANNEL_SUFFIXES:
        raise UndefinedSuffixError(_label(target_os), _label(compat_mode))
    return CHANNEL_SUFFIXES[key]  # type: ignore[index]


def _label(value: Union[TargetOS, CompatMode, str, None]) -> str:
    if isinstance(value, (TargetOS, CompatMode)):
        return value.value
    return str(value)
