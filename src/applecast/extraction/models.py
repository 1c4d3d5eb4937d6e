"""Data models for extracted episode information."""

from pydantic import BaseModel, ConfigDict, Field


class EpisodeMetadata(BaseModel):
    """Metadata for a podcast episode.

    Every field is always present; unknown values are empty strings, so the
    serialized form always carries all four keys in declaration order.

    Example:
        >>> metadata = EpisodeMetadata(
        ...     episode_title="Why Octopuses Hate the Moon",
        ...     show_title="No Such Thing As A Fish",
        ...     publish_date="2023-11-25",
        ... )
        >>> metadata.description
        ''
    """

    model_config = ConfigDict(frozen=True)

    episode_title: str = Field("", description="Episode title")
    description: str = Field("", description="Cleaned episode description")
    show_title: str = Field("", description="Name of the show")
    publish_date: str = Field("", description="Publish date exactly as found in the page")

    @property
    def is_empty(self) -> bool:
        """True when no field could be extracted."""
        return not any(self.model_dump().values())
