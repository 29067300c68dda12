"""Version and build number bump on a decoded Info.plist."""

from typing import Any, Optional

from .config import get_config
from .logger import get_logger
from .models import BumpDirective, BumpKind, BumpResult, VersionString, parse_component

logger = get_logger()


def parse_version(text: str) -> VersionString:
    """Parses a CFBundleShortVersionString value (see VersionString.parse)."""
    return VersionString.parse(text)


def parse_build_number(text: str) -> Optional[int]:
    """Parses a CFBundleVersion value, None if it is not a plain integer."""
    return parse_component(text)


def apply_bump(version: VersionString, kind: BumpKind) -> VersionString:
    """Returns the version after incrementing the component selected by kind.

    Example:
        >>> str(apply_bump(VersionString(1, 2, 3), BumpKind.MINOR))
        '1.3.0'
    """
    if kind is BumpKind.MAJOR:
        return VersionString(version.major + 1, 0, 0)
    if kind is BumpKind.MINOR:
        return VersionString(version.major, version.minor + 1, 0)
    if kind is BumpKind.HOTFIX:
        return VersionString(version.major, version.minor, version.patch + 1)
    return version


def bump(
    snapshot: dict[str, Any],
    directive: BumpDirective,
    always_increment_build: Optional[bool] = None,
    version_key: Optional[str] = None,
    build_key: Optional[str] = None,
) -> BumpResult:
    """Bumps version and build number of a plist snapshot in place.

    The version field is only touched when it is present and a string. The
    build number is incremented when it is a string holding an integer and
    the build policy asks for it; otherwise it is left as is and reported
    as not updated. Both fields are handled independently.

    Args:
        snapshot: Decoded Info.plist dictionary, mutated in place.
        directive: Which version component to bump and the build intent.
        always_increment_build: Increment the build number regardless of
            directive.increment_build. Defaults to config.bump.always_increment_build.
        version_key: Defaults to config.plist.version_key.
        build_key: Defaults to config.plist.build_key.

    Returns:
        BumpResult with previous and new values.

    Example:
        >>> plist = {"CFBundleShortVersionString": "1.2.3", "CFBundleVersion": "40"}
        >>> bump(plist, BumpDirective(kind=BumpKind.MINOR))
        BumpResult(previous_version='1.2.3', previous_build='40', new_version='1.3.0', new_build='41')
    """
    config = get_config()
    if always_increment_build is None:
        always_increment_build = config.bump.always_increment_build
    version_key = version_key or config.plist.version_key
    build_key = build_key or config.plist.build_key

    result = BumpResult()

    version_text = snapshot.get(version_key)
    if isinstance(version_text, str):
        result.previous_version = version_text
        result.new_version = str(apply_bump(parse_version(version_text), directive.kind))
        snapshot[version_key] = result.new_version
    else:
        logger.debug("%s missing or not a string, version left unchanged", version_key)

    build_text = snapshot.get(build_key)
    if isinstance(build_text, str):
        result.previous_build = build_text
        build_number = parse_build_number(build_text)
        if build_number is None:
            logger.debug("%s '%s' is not an integer, build left unchanged", build_key, build_text)
        elif always_increment_build or directive.increment_build:
            result.new_build = str(build_number + 1)
            snapshot[build_key] = result.new_build

    return result
