"""Pants plugin registration for browser AUS update files.

Backend path: pants_aus_update

Enable in pants.toml:

    [GLOBAL]
    backend_packages = [
        "pants_aus_update",
    ]

    [aus-update]
    compat_mode = "x86_64-v3"
    platform_version = "128.0"
    update_hostname = "updates.example.io"
"""

from __future__ import annotations

from typing import Iterable, Type

from pants.engine.rules import Rule
from pants.option.subsystem import Subsystem

from pants_aus_update.goals import update as update_goal
from pants_aus_update.rules import update as update_rule
from pants_aus_update.subsystem import AusUpdateSubsystem
from pants_aus_update.targets import AusReleaseTarget


def rules() -> Iterable[Rule]:
    return [
        *update_rule.rules(),
        *update_goal.rules(),
    ]


def target_types() -> Iterable[type]:
    return [AusReleaseTarget]


def subsystems() -> Iterable[Type[Subsystem]]:
    return [AusUpdateSubsystem]
