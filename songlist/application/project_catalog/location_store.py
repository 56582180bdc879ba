"""
Location Store

Persists the chosen root location as a single line of text so it can be
restored on the next startup.
"""

import logging
from pathlib import Path
from typing import Optional

from ...core.constants import LOCATION_FILENAME
from ...domain.exceptions import LocationWriteError

logger = logging.getLogger(__name__)


class LocationStore:
    """
    Reads and writes the root location file.

    The file holds exactly one line: the absolute path of the last selected
    root directory.
    """

    def __init__(self, data_dir: Optional[Path] = None, filename: str = LOCATION_FILENAME):
        """
        Args:
            data_dir: Directory holding the location file. Defaults to the
                per-user application data directory.
            filename: Name of the location file
        """
        if data_dir is None:
            from songlist.runtime.runtime_config import get_data_dir
            data_dir = get_data_dir()
        self.data_dir = Path(data_dir)
        self.filename = filename

    @property
    def location_file(self) -> Path:
        return self.data_dir / self.filename

    def load(self) -> Optional[Path]:
        """
        Load the saved root location.

        Returns:
            The saved path, or None if nothing usable was saved.
        """
        try:
            with open(self.location_file, 'r', encoding='utf-8', errors='surrogateescape') as f:
                line = f.readline()
        except FileNotFoundError:
            logger.debug(f"No saved location at {self.location_file}")
            return None
        except OSError as e:
            logger.warning(f"Failed to read location file {self.location_file}: {e}")
            return None

        location = line.strip()
        if not location:
            return None
        return Path(location)

    def save(self, path: Path) -> None:
        """
        Save the root location, replacing any previous value.

        Raises:
            LocationWriteError: If the location file cannot be written.
        """
        location = str(Path(path).absolute())
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            with open(self.location_file, 'w', encoding='utf-8', errors='surrogateescape') as f:
                f.write(location)
        except (OSError, UnicodeError) as e:
            raise LocationWriteError(self.location_file, e) from e

        logger.info(f"Location saved: {location}")
