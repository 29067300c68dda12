"""Discovery of Info.plist paths from an Xcode project.

Finds the ``*.xcodeproj`` bundle in a directory, parses its
``project.pbxproj`` (an old-style ASCII property list) and collects the
``INFOPLIST_FILE`` build setting of every build configuration.

``find_plist_paths`` and ``find_default_plist_path`` are the library entry
points for callers that only need the paths; the command line calls
``find_project`` and ``collect_plist_paths`` separately to report each step.
"""

import re
from pathlib import Path
from typing import Any, Optional, Union

from .config import get_config
from .constants import PBXPROJ_FILENAME
from .exceptions import PlistNotFoundError, ProjectNotFoundError, ProjectReadError
from .logger import get_logger
from .models import BuildConfiguration

logger = get_logger()

_TOKEN_RE = re.compile(
    r"""
      (?P<skip>\s+|/\*.*?\*/|//[^\n]*)
    | (?P<string>"(?:[^"\\]|\\.)*")
    | (?P<unterminated>/\*|")
    | (?P<punct>[{}()=;,])
    | (?P<word>[^\s{}()=;,"]+)
    """,
    re.VERBOSE | re.DOTALL,
)

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\", "'": "'"}


def _unquote(token: str) -> str:
    """Strips the quotes of a pbxproj string and resolves escapes."""
    return re.sub(r"\\(.)", lambda m: _ESCAPES.get(m.group(1), m.group(1)), token[1:-1], flags=re.DOTALL)


def tokenize(text: str) -> list[tuple[str, str]]:
    """Splits pbxproj text into (kind, value) tokens, dropping whitespace and comments.

    Raises:
        ProjectReadError: On an unterminated string or comment.
    """
    tokens = []
    pos = 0
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            raise ProjectReadError(f"Unexpected character at offset {pos}: {text[pos:pos + 20]!r}")
        kind = match.lastgroup
        if kind == "unterminated":
            raise ProjectReadError(f"Unterminated string or comment at offset {pos}")
        if kind == "string":
            tokens.append(("value", _unquote(match.group())))
        elif kind == "word":
            tokens.append(("value", match.group()))
        elif kind == "punct":
            tokens.append(("punct", match.group()))
        pos = match.end()
    return tokens


class PbxprojParser:
    """Recursive descent parser for the pbxproj property list syntax.

    Dictionaries become ``dict``, arrays ``list``, everything else ``str``.
    """

    def __init__(self, text: str):
        self._tokens = tokenize(text)
        self._pos = 0

    def parse(self) -> Any:
        value = self._value()
        if self._pos != len(self._tokens):
            raise ProjectReadError(f"Trailing content after token {self._pos}")
        return value

    def _next(self) -> tuple[str, str]:
        if self._pos >= len(self._tokens):
            raise ProjectReadError("Unexpected end of project file")
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def _expect(self, punct: str) -> None:
        kind, value = self._next()
        if kind != "punct" or value != punct:
            raise ProjectReadError(f"Expected '{punct}' but found '{value}'")

    def _peek_punct(self, punct: str) -> bool:
        return self._pos < len(self._tokens) and self._tokens[self._pos] == ("punct", punct)

    def _value(self) -> Any:
        kind, value = self._next()
        if kind == "value":
            return value
        if value == "{":
            return self._dict()
        if value == "(":
            return self._array()
        raise ProjectReadError(f"Unexpected '{value}'")

    def _dict(self) -> dict[str, Any]:
        result = {}
        while not self._peek_punct("}"):
            kind, key = self._next()
            if kind != "value":
                raise ProjectReadError(f"Expected a key but found '{key}'")
            self._expect("=")
            result[key] = self._value()
            self._expect(";")
        self._expect("}")
        return result

    def _array(self) -> list[Any]:
        result = []
        while not self._peek_punct(")"):
            result.append(self._value())
            if not self._peek_punct(")"):
                self._expect(",")
        self._expect(")")
        return result


def find_project(directory: Union[Path, str] = Path("."), suffix: Optional[str] = None) -> Path:
    """Returns the first Xcode project bundle in a directory.

    Args:
        directory: Directory to search (not recursive).
        suffix: Project bundle suffix. Defaults to config.project.suffix.

    Returns:
        Path of the ``.xcodeproj`` entry, entries sorted by name.

    Raises:
        ProjectNotFoundError: If no entry ends with the suffix.
    """
    directory = Path(directory)
    suffix = suffix or get_config().project.suffix

    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise ProjectNotFoundError(f"Failed to list {directory}: {e}") from e

    for entry in entries:
        if entry.name.endswith(suffix):
            logger.info("Found project %s", entry)
            return entry

    raise ProjectNotFoundError(f"Failed to locate an Xcode project in {directory.resolve()}.")


def read_build_configurations(project: Union[Path, str]) -> list[BuildConfiguration]:
    """Parses the XCBuildConfiguration objects of a project bundle.

    Args:
        project: Path of the ``.xcodeproj`` bundle.

    Returns:
        Build configurations in file order.

    Raises:
        ProjectReadError: If project.pbxproj is missing or malformed.
    """
    pbxproj = Path(project) / PBXPROJ_FILENAME
    try:
        text = pbxproj.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ProjectReadError(f"Failed to read {pbxproj}: {e}") from e

    root = PbxprojParser(text).parse()
    objects = root.get("objects") if isinstance(root, dict) else None
    if not isinstance(objects, dict):
        raise ProjectReadError(f"{pbxproj} has no objects dictionary")

    configurations = []
    for identifier, obj in objects.items():
        if not isinstance(obj, dict) or obj.get("isa") != "XCBuildConfiguration":
            continue
        settings = obj.get("buildSettings")
        configurations.append(
            BuildConfiguration(
                identifier=identifier,
                name=str(obj.get("name", "")),
                build_settings=settings if isinstance(settings, dict) else {},
            )
        )

    logger.debug("%d build configurations in %s", len(configurations), pbxproj)
    return configurations


def collect_plist_paths(project: Union[Path, str]) -> list[str]:
    """Collects the Info.plist paths declared by a project bundle.

    Paths are deduplicated, keeping the first occurrence and discovery order.

    Args:
        project: Path of the ``.xcodeproj`` bundle.

    Returns:
        Info.plist paths as written in the project, relative to its directory.

    Raises:
        ProjectReadError: If the project can't be parsed.
        PlistNotFoundError: If no configuration declares an Info.plist.
    """
    project = Path(project)
    setting = get_config().project.info_plist_setting

    plist_paths = []
    for configuration in read_build_configurations(project):
        plist_path = configuration.setting(setting)
        if plist_path is None or plist_path in plist_paths:
            continue
        logger.info("%s: %s", configuration.name, plist_path)
        plist_paths.append(plist_path)

    if not plist_paths:
        raise PlistNotFoundError(f"Failed to locate Info.plist in {project.name}.")

    return plist_paths


def find_plist_paths(directory: Union[Path, str] = Path(".")) -> list[str]:
    """Finds the project in a directory and returns its Info.plist paths."""
    return collect_plist_paths(find_project(directory))


def find_default_plist_path(directory: Union[Path, str] = Path(".")) -> str:
    """Returns the first Info.plist path declared by the project."""
    return find_plist_paths(directory)[0]
