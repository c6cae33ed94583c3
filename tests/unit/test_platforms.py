"""Tests for the AUS platform catalog and channel suffixes (pure functions)."""

from __future__ import annotations

import pytest

from pants_aus_update._exceptions import UndefinedSuffixError
from pants_aus_update._platforms import (
    AUS_PLATFORMS,
    CHANNEL_SUFFIXES,
    aus_platforms_for,
    channel_suffix,
)
from pants_aus_update._types import CompatMode, TargetOS


# =============================================================================
# aus_platforms_for
# =============================================================================


class TestAusPlatformsFor:
    def test_windows(self):
        assert aus_platforms_for(TargetOS.WINDOWS) == (
            "WINNT_x86_64-msvc",
            "WINNT_x86_64-msvc-x64",
            "WINNT_aarch64-msvc-aarch64",
        )

    def test_linux(self):
        assert aus_platforms_for(TargetOS.LINUX) == (
            "Linux_x86_64-gcc3",
            "Linux-aarch64-gcc3",
        )

    def test_macos(self):
        assert aus_platforms_for(TargetOS.MACOS) == (
            "Darwin_x86_64-gcc3-u-i386-x86_64",
            "Darwin_x86-gcc3-u-i386-x86_64",
            "Darwin_x86-gcc3",
            "Darwin_x86_64-gcc3",
            "Darwin_aarch64-gcc3",
        )

    def test_set_sizes(self):
        assert len(aus_platforms_for(TargetOS.WINDOWS)) == 3
        assert len(aus_platforms_for(TargetOS.LINUX)) == 2
        assert len(aus_platforms_for(TargetOS.MACOS)) == 5

    def test_accepts_platform_aliases(self):
        assert aus_platforms_for("win32") == AUS_PLATFORMS[TargetOS.WINDOWS]
        assert aus_platforms_for("darwin") == AUS_PLATFORMS[TargetOS.MACOS]
        assert aus_platforms_for("linux") == AUS_PLATFORMS[TargetOS.LINUX]

    @pytest.mark.parametrize("value", ["freebsd", "linux2", "", None])
    def test_unknown_os_falls_back_to_macos(self, value):
        assert aus_platforms_for(value) == AUS_PLATFORMS[TargetOS.MACOS]

    def test_never_empty(self):
        for target_os in TargetOS:
            assert aus_platforms_for(target_os)


# =============================================================================
# channel_suffix
# =============================================================================


class TestChannelSuffix:
    @pytest.mark.parametrize(
        "target_os, compat_mode, expected",
        [
            (TargetOS.WINDOWS, CompatMode.X86_64, "-generic"),
            (TargetOS.WINDOWS, CompatMode.X86_64_V3, ""),
            (TargetOS.WINDOWS, CompatMode.AARCH64, "-aarch64"),
            (TargetOS.LINUX, CompatMode.X86_64, "-generic"),
            (TargetOS.LINUX, CompatMode.X86_64_V3, ""),
            (TargetOS.LINUX, CompatMode.AARCH64, "-aarch64"),
            (TargetOS.MACOS, CompatMode.X86_64, "-generic"),
            (TargetOS.MACOS, CompatMode.AARCH64, ""),
        ],
    )
    def test_table(self, target_os, compat_mode, expected):
        assert channel_suffix(target_os, compat_mode) == expected

    def test_table_has_eight_entries(self):
        assert len(CHANNEL_SUFFIXES) == 8

    def test_accepts_strings(self):
        assert channel_suffix("linux", "x86_64") == "-generic"
        assert channel_suffix("darwin", "aarch64") == ""

    def test_macos_v3_undefined(self):
        with pytest.raises(UndefinedSuffixError) as exc_info:
            channel_suffix(TargetOS.MACOS, CompatMode.X86_64_V3)
        assert exc_info.value.target_os == "macos"
        assert exc_info.value.compat_mode == "x86_64-v3"

    def test_unknown_os_undefined(self):
        with pytest.raises(UndefinedSuffixError) as exc_info:
            channel_suffix("freebsd", CompatMode.X86_64)
        assert "freebsd" in str(exc_info.value)

    def test_unknown_mode_undefined(self):
        with pytest.raises(UndefinedSuffixError):
            channel_suffix(TargetOS.LINUX, "riscv64")

    def test_every_undefined_pair_raises(self):
        for target_os in TargetOS:
            for compat_mode in CompatMode:
                if (target_os, compat_mode) in CHANNEL_SUFFIXES:
                    continue
                with pytest.raises(UndefinedSuffixError):
                    channel_suffix(target_os, compat_mode)
