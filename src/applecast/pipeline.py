"""Acquisition pipeline: fetch a page, extract metadata, grab the transcript.

Stages run strictly in sequence. Only the page fetch is fatal; every later
stage records its outcome on the result and lets the run continue.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from applecast.config.schema import AcquisitionConfig
from applecast.extraction.metadata import extract_metadata
from applecast.extraction.models import EpisodeMetadata
from applecast.fetch.http import PageFetcher
from applecast.output.manager import OutputManager
from applecast.transcript.locator import find_transcript_url
from applecast.utils.errors import FetchError, WriteError

logger = logging.getLogger(__name__)


class AcquisitionResult(BaseModel):
    """Outcome of one pipeline run.

    For each artifact either the ``*_path`` or the ``*_error`` is set. Both
    stay None for the transcript when the page references no transcript.
    """

    url: str = Field(..., description="Page URL that was fetched")

    page_path: Path | None = None
    page_error: str | None = None

    metadata: EpisodeMetadata = Field(default_factory=EpisodeMetadata)
    metadata_path: Path | None = None
    metadata_error: str | None = None

    transcript_url: str | None = None
    transcript_path: Path | None = None
    transcript_error: str | None = None

    @property
    def transcript_found(self) -> bool:
        return self.transcript_url is not None


class PipelineOrchestrator:
    """Run the acquisition stages for a single URL.

    Example:
        >>> orchestrator = PipelineOrchestrator(AcquisitionConfig(output_dir=Path("out")))
        >>> result = orchestrator.run("https://podcasts.apple.com/us/podcast/id840986946")
        >>> result.metadata.episode_title
        'Why Octopuses Hate the Moon'
    """

    def __init__(
        self,
        config: AcquisitionConfig | None = None,
        fetcher: PageFetcher | None = None,
        output: OutputManager | None = None,
    ):
        self.config = config or AcquisitionConfig()
        self.fetcher = fetcher or PageFetcher(self.config)
        self.output = output or OutputManager(self.config.output_dir)

    def run(self, url: str) -> AcquisitionResult:
        """Process one URL end to end.

        Args:
            url: Validated episode or show URL

        Returns:
            AcquisitionResult describing every artifact

        Raises:
            FetchError: If the page itself cannot be fetched
        """
        logger.info(f"Fetching page {url}")
        page_text = self.fetcher.fetch(url)

        result = AcquisitionResult(url=url)

        try:
            result.page_path = self.output.write_page(page_text)
        except WriteError as e:
            logger.info(f"Page not saved: {e}")
            result.page_error = str(e)

        logger.info("Extracting metadata")
        result.metadata = extract_metadata(page_text)

        try:
            result.metadata_path = self.output.write_metadata(result.metadata)
        except WriteError as e:
            logger.info(f"Metadata not saved: {e}")
            result.metadata_error = str(e)

        self._acquire_transcript(page_text, result)

        return result

    def _acquire_transcript(self, page_text: str, result: AcquisitionResult) -> None:
        result.transcript_url = find_transcript_url(page_text)
        if result.transcript_url is None:
            return

        logger.info(f"Fetching transcript {result.transcript_url}")
        try:
            transcript = self.fetcher.fetch(result.transcript_url)
        except FetchError as e:
            logger.info(f"Transcript not fetched: {e}")
            result.transcript_error = str(e)
            return

        try:
            result.transcript_path = self.output.write_transcript(transcript)
        except WriteError as e:
            logger.info(f"Transcript not saved: {e}")
            result.transcript_error = str(e)
