"""Exception hierarchy for the AUS update plugin."""

from __future__ import annotations

from typing import Sequence


class AusUpdateError(Exception):
    """Base for all AUS update plugin errors."""


class AusConfigurationError(AusUpdateError):
    """An option or target field holds a value the plugin does not understand."""

    def __init__(self, option: str, value: str, *, choices: Sequence[str] = ()):
        self.option = option
        self.value = value
        self.choices = tuple(choices)
        hint = f" Expected one of: {', '.join(self.choices)}" if self.choices else ""
        super().__init__(f"Invalid value for {option}: {value!r}.{hint}")


class MissingArtifactError(AusUpdateError):
    """No mar archive has been built, or the configured path does not exist."""

    def __init__(self, path: str | None, *, command: str = "pants package"):
        self.path = path
        if path:
            detail = f"The mar file {path!r} does not exist!"
        else:
            detail = "No mar file has been built!"
        super().__init__(f"{detail} Make sure you ran |{command}| before this command")


class MissingBuildIdError(AusUpdateError):
    """The platform descriptor has no [Build] BuildID entry."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"No BuildID found in the [Build] section of {source}")


class UndefinedSuffixError(AusUpdateError):
    """No channel directory suffix is defined for an (os, compat mode) pair."""

    def __init__(self, target_os: str, compat_mode: str):
        self.target_os = target_os
        self.compat_mode = compat_mode
        super().__init__(
            f"No update channel suffix is defined for target os {target_os!r} "
            f"with compat mode {compat_mode!r}"
        )


class PlatformIniNotFoundError(AusUpdateError):
    """None of the candidate platform.ini locations exist."""

    def __init__(self, candidates: Sequence[str]):
        self.candidates = tuple(candidates)
        super().__init__(
            "Could not find platform.ini. Looked in: " + ", ".join(self.candidates)
        )


class ManifestWriteError(AusUpdateError):
    """One or more update.xml files could not be written."""

    def __init__(self, failures: Sequence):
        self.failures = tuple(failures)
        paths = ", ".join(str(f.path) for f in self.failures)
        super().__init__(
            f"Failed to write {len(self.failures)} update manifest(s): {paths}"
        )


class PlatformIniParseError(AusUpdateError):
    """platform.ini exists but could not be read."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Could not parse {source}: {reason}")


class UnsafeUpdatePathError(AusUpdateError):
    """An update.xml directory would land outside its platform directory."""

    def __init__(self, path: str, platform_dir: str):
        self.path = path
        self.platform_dir = platform_dir
        super().__init__(
            f"Refusing to write {path}: its directory is not inside {platform_dir}"
        )
