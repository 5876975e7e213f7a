from __future__ import annotations
from dataclasses import fields, replace
from enum import Enum
from typing import Optional, Sequence, Union
import logging

from .builder import (
    AssessmentForm,
    AssessmentRecord,
    Clock,
    IdGenerator,
    build,
    new_assessment_id,
    utc_now,
)
from .catalog import CompetencyKey
from .marks import CompetencyMarks, empty_marks, toggle_mark
from .scoring import ScoreBreakdown, score_marks


logger = logging.getLogger(__name__)

_FORM_FIELDS = tuple(f.name for f in fields(AssessmentForm))


class SessionState(str, Enum):
    EDITING = "editing"
    SUBMITTED = "submitted"


class AssessmentSession:
    """One assessor's in-progress form.

    The session is always editable; a successful ``submit`` passes through
    SUBMITTED and immediately starts over with a blank form. A rejected
    submission leaves the form and marks exactly as they were.
    """

    def __init__(self, form: Optional[AssessmentForm] = None, marks: Optional[CompetencyMarks] = None):
        self.form = form or AssessmentForm()
        self.marks = marks or empty_marks()
        self.state = SessionState.EDITING
        self.last_submitted: Optional[AssessmentRecord] = None

    def set_field(self, name: str, value: str) -> None:
        if name not in _FORM_FIELDS:
            raise AttributeError(f"Unknown form field: {name}")
        self.form = replace(self.form, **{name: value})

    def toggle(self, competency_key: Union[CompetencyKey, str], index: int) -> None:
        self.marks = toggle_mark(self.marks, competency_key, index)

    def preview(self) -> ScoreBreakdown:
        return score_marks(self.marks)

    def reset(self) -> None:
        self.form = AssessmentForm()
        self.marks = empty_marks()
        self.state = SessionState.EDITING

    def submit(
        self,
        existing: Sequence[AssessmentRecord],
        clock: Clock = utc_now,
        id_generator: IdGenerator = new_assessment_id,
    ) -> AssessmentRecord:
        record = build(self.form, self.marks, existing, clock=clock, id_generator=id_generator)
        self.state = SessionState.SUBMITTED
        self.last_submitted = record
        logger.debug("Session submitted %s; starting a fresh form", record.id)
        self.reset()
        return record
