"""Locating shared BasePresenter/BaseView interfaces in the enclosing packages."""

import logging
from collections.abc import Iterator, Sequence
from typing import Optional

from mvp_creator.components.types import BaseInterfaceLocation, SearchStrategy
from mvp_creator.constants import BASE_PACKAGES, BASE_PRESENTER, BASE_VIEW, DEFAULT_SEARCH_DEPTH, DEFAULT_SOURCE_ROOT_MARKER, FILE_EXTENSION
from mvp_creator.package_resolver import split_package
from mvp_creator.store import DirectoryStore

logger = logging.getLogger(__name__)


def _searched_directories(start_dir: DirectoryStore, strategy: SearchStrategy, depth: int) -> Iterator[DirectoryStore]:
    if strategy == SearchStrategy.NONE:
        return
    yield start_dir
    if strategy == SearchStrategy.SIBLING:
        return

    current = start_dir.parent
    level = 1
    while current is not None and level <= depth:
        yield current
        current = current.parent
        level += 1


def _find_package_dir(directory: DirectoryStore, package: str) -> Optional[DirectoryStore]:
    current: Optional[DirectoryStore] = directory
    for segment in split_package(package):
        current = current.find_subdirectory(segment, ignore_case=False)
        if current is None:
            return None
    return current


def find_existing_base_interfaces(
    start_dir: DirectoryStore,
    strategy: SearchStrategy = SearchStrategy.ANCESTORS,
    depth: int = DEFAULT_SEARCH_DEPTH,
    base_packages: Sequence[str] = BASE_PACKAGES,
    source_root_marker: str = DEFAULT_SOURCE_ROOT_MARKER,
) -> BaseInterfaceLocation:
    """Search for already existing base interfaces.

    Each searched directory is checked for the candidate base packages
    (``base``, ``common.base`` ...). The first package holding
    ``BasePresenter.java`` and the first holding ``BaseView.java`` win; the
    two are looked up independently, so only one of them may be found.

    Args:
        start_dir: Directory the new feature package is created in
        strategy: none, sibling (start_dir only) or ancestors (start_dir and its parents)
        depth: How many parent levels the ancestors strategy climbs
        base_packages: Dotted candidate packages tried under every searched directory
        source_root_marker: Path segment marking the source root

    Returns:
        Packages of the located interfaces, None where nothing was found
    """
    presenter_package: Optional[str] = None
    view_package: Optional[str] = None

    for directory in _searched_directories(start_dir, strategy, depth):
        for candidate in base_packages:
            base_dir = _find_package_dir(directory, candidate)
            if base_dir is None:
                continue

            package = base_dir.package_name(source_root_marker)
            if not package:
                logger.debug("Ignoring %s under %s: not below a source root", candidate, directory.name)
                continue

            logger.debug("Checking base package %s", package)
            if presenter_package is None and base_dir.has_file(BASE_PRESENTER + FILE_EXTENSION):
                presenter_package = package
            if view_package is None and base_dir.has_file(BASE_VIEW + FILE_EXTENSION):
                view_package = package

            if presenter_package is not None and view_package is not None:
                logger.debug("Found base interfaces in %s and %s", presenter_package, view_package)
                return BaseInterfaceLocation(presenter_package=presenter_package, view_package=view_package)

    return BaseInterfaceLocation(presenter_package=presenter_package, view_package=view_package)
