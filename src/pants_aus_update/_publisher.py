"""Write update.xml files into the AUS directory tree.

    <update-root>/
        browser/
            <aus-platform>/
                <channel><suffix>/
                    update.xml
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Union

from pants_aus_update._exceptions import (
    AusConfigurationError,
    ManifestWriteError,
    UnsafeUpdatePathError,
)
from pants_aus_update._update_manifest import UpdateManifest, render_update_xml

logger = logging.getLogger(__name__)

UPDATE_FILE_NAME = "update.xml"


def update_xml_path(
    update_root: Union[str, Path], aus_platform: str, channel: str, suffix: str
) -> Path:
    return Path(update_root) / "browser" / aus_platform / f"{channel}{suffix}" / UPDATE_FILE_NAME


def ensure_empty(directory: Union[str, Path]) -> None:
    """Create ``directory``, removing anything already inside it."""
    directory = Path(directory)
    if directory.exists():
        shutil.rmtree(directory)
    directory.mkdir(parents=True, exist_ok=True)


def validate_channel(channel: str) -> str:
    """Return ``channel`` if it is usable as a single directory name."""
    if (
        not channel
        or channel != channel.strip()
        or channel.startswith(".")
        or "/" in channel
        or "\\" in channel
    ):
        raise AusConfigurationError("channel", channel)
    return channel


def check_inside_platform_dir(
    update_root: Union[str, Path], aus_platform: str, xml_path: Union[str, Path]
) -> None:
    """Make sure the update.xml directory is a direct child of its platform directory."""
    browser_dir = (Path(update_root) / "browser").resolve()
    platform_dir = (browser_dir / aus_platform).resolve()
    channel_dir = Path(xml_path).parent.resolve()
    if platform_dir.parent != browser_dir or channel_dir.parent != platform_dir:
        raise UnsafeUpdatePathError(str(xml_path), str(platform_dir))


def write_atomic(path: Union[str, Path], content: str) -> None:
    """Write text so that ``path`` only ever holds complete content."""
    path = Path(path)
    fd, tmp_path = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


@dataclass(frozen=True)
class WriteFailure:
    """An update.xml that could not be written."""

    aus_platform: str
    path: Path
    error: str


@dataclass
class PublishReport:
    """Outcome of writing update.xml for every platform of an os."""

    written: list[Path] = field(default_factory=list)
    failures: list[WriteFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def raise_for_failures(self) -> None:
        if self.failures:
            raise ManifestWriteError(self.failures)


def publish_update_manifests(
    manifest: UpdateManifest,
    aus_platforms: Iterable[str],
    *,
    update_root: Union[str, Path],
    channel: str,
    suffix: str,
) -> PublishReport:
    """Write ``manifest`` once per AUS platform.

    A failure for one platform is recorded and the remaining platforms are
    still written.

    Raises:
        UnsafeUpdatePathError: a target directory escapes its platform
            directory. Raised before anything is written.
    """
    content = render_update_xml(manifest)
    report = PublishReport()

    targets = [
        (aus_platform, update_xml_path(update_root, aus_platform, channel, suffix))
        for aus_platform in aus_platforms
    ]
    # Checked up front: ensure_empty removes whatever directory it is given.
    for aus_platform, xml_path in targets:
        check_inside_platform_dir(update_root, aus_platform, xml_path)

    for aus_platform, xml_path in targets:
        try:
            ensure_empty(xml_path.parent)
            write_atomic(xml_path, content)
        except OSError as e:
            logger.error("Failed to write %s: %s", xml_path, e)
            report.failures.append(
                WriteFailure(aus_platform=aus_platform, path=xml_path, error=str(e))
            )
            continue

        logger.info("Wrote %s", xml_path)
        report.written.append(xml_path)

    return report
