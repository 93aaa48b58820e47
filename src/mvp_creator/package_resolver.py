"""Mapping dotted package names onto nested directories."""

import logging

from mvp_creator.errors import DirectoryCreationError, InvalidInputError, InvalidPackageNameError
from mvp_creator.store import DirectoryStore

logger = logging.getLogger(__name__)


def split_package(package_name: str) -> list[str]:
    """Split a dotted package name into its non-empty segments."""
    return [segment.strip() for segment in package_name.split(".") if segment.strip()]


def last_segment(package_name: str) -> str:
    """Final dot-separated segment, empty if the name ends with a dot."""
    return package_name.strip().rsplit(".", 1)[-1].strip()


def validate_package_name(package_name: str) -> str:
    """Check a user-entered package name and return it stripped.

    Raises:
        InvalidInputError: If the name is blank
        InvalidPackageNameError: If the name has no usable final segment
    """
    if package_name is None or not package_name.strip():
        raise InvalidInputError("Package name must not be blank")

    stripped = package_name.strip()
    if not last_segment(stripped):
        raise InvalidPackageNameError(stripped, "the final segment is empty")
    return stripped


def class_name_prefix(package_name: str) -> str:
    """Class name prefix for a package: its final segment with the first letter upper-cased.

    >>> class_name_prefix("com.app.bluetooth")
    'Bluetooth'
    """
    segment = last_segment(package_name)
    if not segment:
        raise InvalidPackageNameError(package_name)
    return segment[0].upper() + segment[1:]


def join_package(*parts: str) -> str:
    """Join package fragments, ignoring empty ones."""
    return ".".join(part for part in parts if part)


def resolve_or_create(root: DirectoryStore, package_name: str) -> DirectoryStore:
    """Walk root along package_name, creating any missing directory.

    Existing directories are matched ignoring case; new ones are created in
    lower case, so repeated calls find what earlier calls created.

    Raises:
        DirectoryCreationError: If a segment cannot be created
    """
    current = root
    for segment in split_package(package_name):
        existing = current.find_subdirectory(segment, ignore_case=True)
        if existing is not None:
            logger.debug("Found existing directory %s for segment %s", existing.name, segment)
            current = existing
            continue

        try:
            created = current.create_subdirectory(segment.lower())
        except OSError as e:
            raise DirectoryCreationError(segment, str(e)) from e
        if created is None or not created.is_valid():
            raise DirectoryCreationError(segment, "directory handle is invalid")
        current = created

    return current
