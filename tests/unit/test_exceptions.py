"""Tests for AUS update exceptions."""

from __future__ import annotations

from pathlib import Path

from pants_aus_update._exceptions import (
    AusConfigurationError,
    AusUpdateError,
    ManifestWriteError,
    MissingArtifactError,
    MissingBuildIdError,
    PlatformIniNotFoundError,
    PlatformIniParseError,
    UndefinedSuffixError,
    UnsafeUpdatePathError,
)
from pants_aus_update._publisher import WriteFailure


class TestExceptionHierarchy:
    def test_base_exception(self):
        for cls in (
            AusConfigurationError,
            MissingArtifactError,
            MissingBuildIdError,
            UndefinedSuffixError,
            PlatformIniNotFoundError,
            ManifestWriteError,
            PlatformIniParseError,
            UnsafeUpdatePathError,
        ):
            assert issubclass(cls, AusUpdateError)


class TestAusConfigurationError:
    def test_without_choices(self):
        err = AusConfigurationError("[aus-update].platform_version", "")
        assert str(err) == "Invalid value for [aus-update].platform_version: ''."

    def test_with_choices(self):
        err = AusConfigurationError("compat_mode", "arm", choices=["x86_64", "aarch64"])
        assert str(err).endswith("Expected one of: x86_64, aarch64")
        assert err.choices == ("x86_64", "aarch64")


class TestMissingArtifactError:
    def test_not_built(self):
        err = MissingArtifactError(None)
        assert err.path is None
        assert "No mar file has been built!" in str(err)
        assert "|pants package|" in str(err)

    def test_missing_path(self):
        err = MissingArtifactError("dist/output.mar")
        assert "dist/output.mar" in str(err)

    def test_custom_command(self):
        assert "|surfer package|" in str(MissingArtifactError(None, command="surfer package"))


class TestMissingBuildIdError:
    def test_message(self):
        err = MissingBuildIdError("obj/dist/bin/platform.ini")
        assert err.source == "obj/dist/bin/platform.ini"
        assert "obj/dist/bin/platform.ini" in str(err)


class TestUndefinedSuffixError:
    def test_message(self):
        err = UndefinedSuffixError("macos", "x86_64-v3")
        assert "'macos'" in str(err)
        assert "'x86_64-v3'" in str(err)


class TestManifestWriteError:
    def test_lists_paths(self):
        failures = [
            WriteFailure("Linux_x86_64-gcc3", Path("a/update.xml"), "denied"),
            WriteFailure("Linux-aarch64-gcc3", Path("b/update.xml"), "denied"),
        ]
        err = ManifestWriteError(failures)
        assert "2 update manifest(s)" in str(err)
        assert "a/update.xml" in str(err)
        assert "b/update.xml" in str(err)


class TestPlatformIniParseError:
    def test_message(self):
        err = PlatformIniParseError("obj/dist/bin/platform.ini", "File contains no section headers.")
        assert err.source == "obj/dist/bin/platform.ini"
        assert str(err).startswith("Could not parse obj/dist/bin/platform.ini:")
        assert "no section headers" in str(err)


class TestUnsafeUpdatePathError:
    def test_message(self):
        err = UnsafeUpdatePathError("update/browser/update.xml", "/abs/update/browser/WINNT_x86-msvc")
        assert err.path == "update/browser/update.xml"
        assert "Refusing to write update/browser/update.xml" in str(err)
        assert "/abs/update/browser/WINNT_x86-msvc" in str(err)
