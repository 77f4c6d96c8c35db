# Per-item-type payload models. `content` is shown to the test-taker,
# `scoring_rubric` is grading-only.
from __future__ import annotations

import re
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, model_validator

# Unknown keys are an authoring mistake: report them instead of dropping them.
_PAYLOAD_CONFIG = ConfigDict(extra="forbid")

StrictPositiveInt = Annotated[int, Field(strict=True, gt=0)]

BLANK_MARKER_RE = re.compile(r"\{\{(\d+)\}\}")


# ---------- PTE: Read Aloud ----------


class ReadAloudContent(BaseModel):
    model_config = _PAYLOAD_CONFIG
    text: StrictStr = Field(min_length=1)
    time_limit: StrictPositiveInt = 40  # seconds
    prep_time: StrictPositiveInt = 25  # seconds


class ReadAloudRubric(BaseModel):
    model_config = _PAYLOAD_CONFIG
    transcript: StrictStr
    keywords: Optional[List[StrictStr]] = None


# ---------- PTE: Fill In Blanks (Dropdown) ----------


class FibDropdownBlank(BaseModel):
    model_config = _PAYLOAD_CONFIG
    index: StrictInt
    options: List[StrictStr] = Field(min_length=2)


class FibDropdownContent(BaseModel):
    """Template text with ``{{n}}`` markers, one dropdown per marker."""

    model_config = _PAYLOAD_CONFIG
    text_template: StrictStr
    blanks: List[FibDropdownBlank] = Field(min_length=1)

    @model_validator(mode="after")
    def _blanks_match_template(self) -> "FibDropdownContent":
        markers = {int(m) for m in BLANK_MARKER_RE.findall(self.text_template)}
        if not markers:
            raise ValueError("text_template must contain at least one blank marker like {{0}}")
        indexes = [b.index for b in self.blanks]
        if len(set(indexes)) != len(indexes):
            raise ValueError("blank indexes must be unique")
        missing = sorted(set(indexes) - markers)
        if missing:
            raise ValueError(f"blanks without a marker in text_template: {missing}")
        return self


class FibDropdownAnswer(BaseModel):
    model_config = _PAYLOAD_CONFIG
    blank_index: StrictInt
    correct_option: StrictStr


class FibDropdownRubric(BaseModel):
    model_config = _PAYLOAD_CONFIG
    answers: List[FibDropdownAnswer]
