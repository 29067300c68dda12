"""Data models for xcode-bump."""

from __future__ import annotations

import plistlib
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def parse_component(text: str) -> int | None:
    """Parses a non-negative decimal integer, or returns None."""
    text = text.strip()
    if text.isascii() and text.isdigit():
        return int(text)
    return None


@dataclass(frozen=True)
class VersionString:
    """Semantic version triple as stored in CFBundleShortVersionString.

    Attributes:
        major: Major component.
        minor: Minor component.
        patch: Patch (hotfix) component.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, text: str) -> VersionString:
        """Parses ``"major.minor.patch"`` leniently.

        Non-numeric components become 0, missing components are padded
        with 0 and components beyond the third are ignored.

        Args:
            text: The version string from the plist.

        Returns:
            Parsed VersionString.
        """
        parts = [parse_component(part) or 0 for part in text.split(".")]
        parts = (parts + [0, 0, 0])[:3]
        return cls(*parts)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


class BumpKind(Enum):
    """Which version component to increment."""

    MAJOR = "major"
    MINOR = "minor"
    HOTFIX = "hotfix"
    NONE = "none"


# First set flag wins.
BUMP_PRIORITY: tuple[BumpKind, ...] = (BumpKind.MAJOR, BumpKind.MINOR, BumpKind.HOTFIX)


class BumpDirective(BaseModel):
    """A version bump plus the independent build increment intent.

    Attributes:
        kind: Selected version component.
        increment_build: Whether the build number was asked to be incremented.
    """

    kind: BumpKind = BumpKind.NONE
    increment_build: bool = False

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_flags(
        cls, major: bool = False, minor: bool = False, hotfix: bool = False, build: bool = False
    ) -> BumpDirective:
        """Builds a directive from command line flags using BUMP_PRIORITY.

        Example:
            >>> BumpDirective.from_flags(minor=True, hotfix=True).kind
            <BumpKind.MINOR: 'minor'>
        """
        flags = {BumpKind.MAJOR: major, BumpKind.MINOR: minor, BumpKind.HOTFIX: hotfix}
        kind = next((k for k in BUMP_PRIORITY if flags[k]), BumpKind.NONE)
        return cls(kind=kind, increment_build=build)


class BumpRequest(BaseModel):
    """Validated command line options.

    Attributes:
        major: Bump the major version.
        minor: Bump the minor version.
        hotfix: Bump the hotfix version.
        build: Bump the build number.
        path: Explicit Info.plist path, skips project discovery.
    """

    major: bool = False
    minor: bool = False
    hotfix: bool = False
    build: bool = False
    path: str | None = None

    @field_validator("path")
    @classmethod
    def blank_path_is_none(cls, v: str | None) -> str | None:
        """Treats an empty or whitespace-only path as not given."""
        if v is None or not v.strip():
            return None
        return v

    @property
    def directive(self) -> BumpDirective:
        return BumpDirective.from_flags(self.major, self.minor, self.hotfix, self.build)


@dataclass
class BumpResult:
    """Previous and new values of a bump, for reporting.

    Attributes:
        previous_version: Version string before the bump, None if absent.
        previous_build: Build string before the bump, None if absent.
        new_version: Version string written back, None if not written.
        new_build: Build string written back, None if not incremented.
    """

    previous_version: str | None = None
    previous_build: str | None = None
    new_version: str | None = None
    new_build: str | None = None

    @property
    def changed(self) -> bool:
        """Whether any field was written into the snapshot."""
        return self.new_version is not None or self.new_build is not None


@dataclass
class PlistDocument:
    """A decoded plist together with the format it was read in.

    Attributes:
        data: The decoded top-level dictionary (the snapshot).
        fmt: plistlib.FMT_XML or plistlib.FMT_BINARY.
    """

    data: dict[str, Any] = field(default_factory=dict)
    fmt: plistlib.PlistFormat = plistlib.FMT_XML

    @property
    def is_binary(self) -> bool:
        return self.fmt == plistlib.FMT_BINARY


@dataclass
class BuildConfiguration:
    """One XCBuildConfiguration object of a project.pbxproj.

    Attributes:
        identifier: Object id in the project file.
        name: Configuration name (e.g. "Debug").
        build_settings: Parsed buildSettings dictionary.
    """

    identifier: str
    name: str
    build_settings: dict[str, Any] = field(default_factory=dict)

    def setting(self, key: str) -> str | None:
        """Returns a string-valued build setting, or None."""
        value = self.build_settings.get(key)
        return value if isinstance(value, str) else None
