"""Custom exceptions for xcode-bump."""


class XcodeBumpError(Exception):
    """Base exception for all application errors."""

    pass


class ResolutionError(XcodeBumpError):
    """Raised when the set of plist files to operate on cannot be determined.

    These errors abort the whole run.
    """

    pass


class PlistPathNotFoundError(ResolutionError):
    """Raised when an explicitly supplied plist path does not exist.

    Attributes:
        path: The path given on the command line.
    """

    def __init__(self, path: str):
        """Initializes PlistPathNotFoundError.

        Args:
            path: The path given on the command line.
        """
        self.path = path
        super().__init__(f"No Info.plist file found at specified path: {path}")


class ProjectNotFoundError(ResolutionError):
    """Raised when no Xcode project exists in the working directory."""

    pass


class ProjectReadError(ResolutionError):
    """Raised when project.pbxproj can't be read or parsed."""

    pass


class PlistNotFoundError(ResolutionError):
    """Raised when the project declares no Info.plist file."""

    pass


class SelectionInputError(ResolutionError):
    """Raised when the interactive selection cannot be read."""

    pass


class PlistError(XcodeBumpError):
    """Error confined to a single plist file.

    Attributes:
        path: The plist file concerned.
        details: Detailed error message.
    """

    def __init__(self, path, details: str):
        """Initializes PlistError.

        Args:
            path: The plist file concerned.
            details: Detailed error message.
        """
        self.path = path
        self.details = details
        super().__init__(f"{path}: {details}")


class PlistReadError(PlistError):
    """Plist bytes unreadable or content undecodable."""


class PlistWriteError(PlistError):
    """Plist could not be encoded or written back."""


class ConfigError(XcodeBumpError):
    """Raised when the configuration file is not a YAML mapping."""

    pass
