"""Writing generated files without touching existing ones."""

import logging
from typing import Optional

from mvp_creator.components.types import NotificationLevel, WriteStatus
from mvp_creator.errors import FileWriteError
from mvp_creator.notifier import Notifier
from mvp_creator.store import DirectoryStore

logger = logging.getLogger(__name__)


class FileWriter:
    """Writes artifacts into a directory, skipping names that already exist."""

    def __init__(self, notifier: Optional[Notifier] = None):
        self.notifier = notifier

    def write_if_absent(self, directory: DirectoryStore, file_name: str, content: str) -> WriteStatus:
        """Create file_name with content unless it already exists.

        Raises:
            FileWriteError: If the file cannot be created
        """
        if directory.has_file(file_name):
            logger.warning("File %s already exists - skipped", file_name)
            if self.notifier is not None:
                self.notifier.notify(NotificationLevel.WARNING, "Warning", f"File {file_name} already exists - skipped")
            return WriteStatus.SKIPPED

        try:
            directory.create_file(file_name, content)
        except OSError as e:
            raise FileWriteError(file_name, str(e)) from e

        logger.info("Created %s", file_name)
        return WriteStatus.WRITTEN

