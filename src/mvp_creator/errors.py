"""Errors raised while generating MVP packages."""


class MvpCreatorError(Exception):
    """Base class for all generation errors."""

    pass


class InvalidInputError(MvpCreatorError):
    """Raised when the user input cannot start a generation run."""

    pass


class InvalidPackageNameError(InvalidInputError):
    """Raised when no class name can be derived from a package name."""

    def __init__(self, package_name: str, reason: str = "no class name can be derived"):
        self.package_name = package_name
        super().__init__(f"Invalid package name '{package_name}': {reason}")


class DirectoryCreationError(MvpCreatorError):
    """Raised when a package directory could not be created."""

    def __init__(self, segment: str, reason: str = ""):
        self.segment = segment
        message = f"Failed to create directory: {segment}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class FileWriteError(MvpCreatorError):
    """Raised when a generated file could not be written."""

    def __init__(self, file_name: str, reason: str = ""):
        self.file_name = file_name
        message = f"Failed to create file {file_name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ConfigError(MvpCreatorError):
    """Raised when the configuration file is missing or invalid."""

    pass


class PreferenceError(MvpCreatorError):
    """Raised when the last used options cannot be stored."""

    pass
