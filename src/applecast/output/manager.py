"""File output manager for writing run artifacts to disk.

Handles directory creation, atomic file writes, and metadata serialization.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from ..extraction.models import EpisodeMetadata
from ..utils.errors import WriteError

logger = logging.getLogger(__name__)

PAGE_FILENAME = "episode.html"
METADATA_FILENAME = "metadata.json"
TRANSCRIPT_FILENAME = "transcript.ttml"


def _current_umask() -> int:
    # os.umask only reads by setting, so restore immediately
    mask = os.umask(0)
    os.umask(mask)
    return mask


class OutputManager:
    """Manage file output for a single acquisition run.

    Each artifact is written independently; a failure on one leaves the
    others untouched.

    Example:
        >>> manager = OutputManager(output_dir=Path("./output"))
        >>> manager.write_metadata(metadata)
        PosixPath('output/metadata.json')
    """

    def __init__(self, output_dir: Path):
        """Initialize output manager.

        The directory is created lazily on first write.

        Args:
            output_dir: Directory that receives all artifacts
        """
        self.output_dir = output_dir

    @property
    def page_path(self) -> Path:
        return self.output_dir / PAGE_FILENAME

    @property
    def metadata_path(self) -> Path:
        return self.output_dir / METADATA_FILENAME

    @property
    def transcript_path(self) -> Path:
        return self.output_dir / TRANSCRIPT_FILENAME

    def write_page(self, html: str) -> Path:
        """Write the fetched page HTML.

        Raises:
            WriteError: If the file cannot be written
        """
        return self.write(self.page_path, html)

    def write_metadata(self, metadata: EpisodeMetadata) -> Path:
        """Write metadata as pretty-printed JSON.

        All four fields are written in declaration order, empty ones as "".

        Raises:
            WriteError: If the file cannot be written
        """
        content = json.dumps(metadata.model_dump(), indent=2, ensure_ascii=False)
        return self.write(self.metadata_path, content + "\n")

    def write_transcript(self, transcript: str) -> Path:
        """Write the raw transcript document.

        Raises:
            WriteError: If the file cannot be written
        """
        return self.write(self.transcript_path, transcript)

    def write(self, file_path: Path, content: str) -> Path:
        """Write text to a path, creating parent directories as needed.

        Args:
            file_path: Target file path
            content: File content

        Returns:
            The path written

        Raises:
            WriteError: If directory creation or the write fails
        """
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            self._write_file_atomic(file_path, content)
        except OSError as e:
            raise WriteError(f"Failed to write {file_path}: {e}", path=file_path) from e

        logger.debug(f"Wrote {file_path}")
        return file_path

    def _write_file_atomic(self, file_path: Path, content: str) -> None:
        """Write file atomically with guaranteed durability.

        Content goes to a temp file in the same directory, is fsynced, then
        renamed over the target, so readers never see a partial file.

        Args:
            file_path: Target file path
            content: File content

        Raises:
            OSError: If write or sync fails
        """
        # Same directory keeps the rename on one filesystem
        temp_fd, temp_path = tempfile.mkstemp(
            dir=file_path.parent, prefix=".tmp_", suffix=file_path.suffix
        )

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())

            # mkstemp creates 0600; give the artifact the usual umask-based mode
            os.chmod(temp_path, 0o666 & ~_current_umask())
            Path(temp_path).replace(file_path)

            # Persist the rename; not every filesystem supports directory fsync
            try:
                dir_fd = os.open(file_path.parent, os.O_RDONLY)
                try:
                    os.fsync(dir_fd)
                finally:
                    os.close(dir_fd)
            except (OSError, AttributeError) as e:
                logger.debug(f"Directory fsync not supported: {e}")

        except Exception:
            Path(temp_path).unlink(missing_ok=True)
            raise
