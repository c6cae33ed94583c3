"""AUS update.xml assembly and serialization (no Pants dependencies).

The update client expects exactly this document:

    <?xml version="1.0"?>
    <updates>
      <update type="minor" displayVersion="..." appVersion="..."
              platformVersion="..." buildID="...">
        <patch type="complete" URL="..." hashFunction="sha512"
               hashValue="..." size="..."/>
      </update>
    </updates>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from pants_aus_update._exceptions import MissingBuildIdError
from pants_aus_update._platform_ini import PlatformInfo
from pants_aus_update._types import ReleaseInfo

HASH_FUNCTION = "sha512"


@dataclass(frozen=True)
class PatchDescriptor:
    """A single downloadable patch for an update."""

    url: str
    hash_value: str
    size: int
    type: str = "complete"
    hash_function: str = HASH_FUNCTION

    def to_attributes(self) -> dict[str, str]:
        return {
            "type": self.type,
            "URL": self.url,
            "hashFunction": self.hash_function,
            "hashValue": self.hash_value,
            "size": str(self.size),
        }


@dataclass(frozen=True)
class UpdateManifest:
    """Content of one update.xml. Identical for every platform of an os."""

    display_version: str
    app_version: str
    platform_version: str
    build_id: str
    patch: PatchDescriptor
    # TODO: derive major/minor from the previous release version once it is stored.
    type: str = "minor"

    def to_attributes(self) -> dict[str, str]:
        return {
            "type": self.type,
            "displayVersion": self.display_version,
            "appVersion": self.app_version,
            "platformVersion": self.platform_version,
            "buildID": self.build_id,
        }


def assemble_update_manifest(
    *,
    release: ReleaseInfo,
    platform_info: PlatformInfo,
    artifact_url: str,
    hash_value: str,
    size: int,
    platform_version: str,
) -> UpdateManifest:
    """Build the update descriptor for a complete mar.

    Raises:
        MissingBuildIdError: platform.ini has no [Build] BuildID.
    """
    build_id = platform_info.build_id
    if build_id is None:
        raise MissingBuildIdError(platform_info.path)

    return UpdateManifest(
        display_version=release.display_version,
        app_version=release.display_version,
        platform_version=platform_version,
        build_id=build_id,
        patch=PatchDescriptor(url=artifact_url, hash_value=hash_value, size=size),
    )


def render_update_xml(manifest: UpdateManifest) -> str:
    """Serialize to pretty-printed update.xml text."""
    root = ET.Element("updates")
    update = ET.SubElement(root, "update", manifest.to_attributes())
    ET.SubElement(update, "patch", manifest.patch.to_attributes())
    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode", short_empty_elements=True)
    return f'<?xml version="1.0"?>\n{body}\n'
