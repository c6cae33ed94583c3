"""Read the platform.ini written into the browser's dist directory."""

from __future__ import annotations

import configparser
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from pants.util.frozendict import FrozenDict

from pants_aus_update._exceptions import (
    PlatformIniNotFoundError,
    PlatformIniParseError,
)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class PlatformInfo:
    """Parsed platform.ini: ``sections[section][key] -> value``."""

    path: str
    sections: FrozenDict[str, FrozenDict[str, str]] = FrozenDict()

    def get(self, section: str, key: str) -> Optional[str]:
        values = self.sections.get(section)
        if values is None:
            return None
        return values.get(key)

    @property
    def build_id(self) -> Optional[str]:
        value = self.get("Build", "BuildID")
        if value is None or not value.strip():
            return None
        return value.strip()


def platform_ini_candidates(obj_dir: PathLike, binary_name: str) -> tuple[Path, ...]:
    """Locations platform.ini may be found in, in order of preference."""
    dist = Path(obj_dir) / "dist"
    return (
        dist / binary_name / "platform.ini",
        dist / "bin" / "platform.ini",
    )


def find_platform_ini(candidates: Iterable[PathLike]) -> Path:
    """Return the first candidate that exists."""
    checked = []
    for candidate in candidates:
        path = Path(candidate)
        if path.is_file():
            return path
        checked.append(str(path))
    raise PlatformIniNotFoundError(checked)


def read_platform_ini(path: PathLike) -> PlatformInfo:
    # Keys such as BuildID are case sensitive for consumers.
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    try:
        with open(path, encoding="utf-8") as f:
            parser.read_file(f, source=str(path))
    except (configparser.Error, UnicodeDecodeError) as e:
        raise PlatformIniParseError(str(path), str(e)) from e

    sections = FrozenDict(
        {
            name: FrozenDict(dict(parser.items(name, raw=True)))
            for name in parser.sections()
        }
    )
    return PlatformInfo(path=str(path), sections=sections)
