from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig


class EloquentColumnConfig(SingleColumnConfig):
    """Score transcript columns for word repetition and emotional tone.

    Each row's text is scored for repeated content words, and optionally for
    confidence, energy, anxiety, and pacing, producing one dict per row.

    Attributes:
        target_columns: Columns whose text content will be concatenated and scored.
        duration_column: Optional column holding the speaking time in seconds,
            used for pacing.
        max_repetition_rate: Highest repetition rate (percent of words) for
            ``is_valid=True``. Defaults to 8.0, the top of the "low" severity band.
        include_emotion: Include the emotional-tone analysis in the output.
        include_word_frequency: Include the full word-frequency map.
    """

    target_columns: list[str]
    duration_column: Optional[str] = Field(default=None, description="Column with speaking time in seconds")
    max_repetition_rate: float = Field(default=8.0, ge=0, description="Maximum repetition rate for is_valid=True")
    include_emotion: bool = Field(default=True, description="Include emotional-tone analysis in output")
    include_word_frequency: bool = Field(default=False, description="Include the word-frequency map in output")
    column_type: Literal["eloquent-coach"] = "eloquent-coach"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f3a4"

    @property
    def required_columns(self) -> list[str]:
        if self.duration_column:
            return [*self.target_columns, self.duration_column]
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
