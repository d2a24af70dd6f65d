"""Dictionary domain - logical name segments to physical name fragments."""

from pydantic import BaseModel, Field

SEGMENT_SEPARATOR = "."


class Dictionary(BaseModel):
    """
    A per-segment logical-to-physical name translation table.

    Translation is whole-segment only: ``word1.word2`` looks up ``word1``
    and ``word2`` separately and concatenates the results. Segments with
    no entry pass through unchanged.
    """

    entries: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def translate(self, logical_name: str | None) -> str:
        """Translate a dotted logical name into a physical name."""
        if not logical_name:
            return ""
        return "".join(
            self.entries.get(segment) or segment
            for segment in logical_name.split(SEGMENT_SEPARATOR)
        )

    def __contains__(self, segment: object) -> bool:
        return segment in self.entries

    def __len__(self) -> int:
        return len(self.entries)
