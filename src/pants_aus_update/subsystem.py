"""Global AUS update configuration subsystem."""

from __future__ import annotations

from pants.option.option_types import StrOption
from pants.option.subsystem import Subsystem


class AusUpdateSubsystem(Subsystem):
    """Global configuration for browser update file generation."""

    options_scope = "aus-update"
    help = "Configuration for generating browser AUS update.xml files."

    update_hostname = StrOption(
        default="",
        help="Host serving mar archives when no GitHub repo is configured. Empty = localhost:8000.",
    )

    compat_mode = StrOption(
        default="x86_64",
        help="CPU compatibility tier of the build: x86_64, x86_64-v3 or aarch64.",
    )

    target_os = StrOption(
        default="",
        help="Operating system the build targets: windows, linux or macos. Empty = host os.",
    )

    platform_version = StrOption(
        default="",
        help="Version of the underlying engine, written as platformVersion in update.xml.",
    )

    preview_channel = StrOption(
        default="twilight",
        help="Rolling preview channel. Its releases are tagged with the channel name instead of the version.",
    )

    update_root = StrOption(
        default="dist/update",
        help="Directory the browser/<platform>/<channel>/update.xml tree is written under.",
    )

    obj_dir = StrOption(
        default="engine/obj",
        help="Engine object directory containing dist/<binary>/platform.ini.",
    )

    binary_name = StrOption(
        default="browser",
        help="Name of the browser binary, used to locate platform.ini.",
    )
