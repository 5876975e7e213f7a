"""Turns a filled-in assessment form and its marks into a finished record.

Validation order is fixed: required fields first, then the duplicate check
against the caller's history, then scoring. Time and id generation are
passed in so that ``build`` is deterministic for given inputs.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Sequence, Tuple
import logging
import secrets
import string
import time

from .marks import CompetencyMarks
from .scoring import score_marks


logger = logging.getLogger(__name__)

REQUIRED_FIELDS: Tuple[str, ...] = ("candidate_name", "assessor_name", "group_id", "case_study")

Clock = Callable[[], datetime]
IdGenerator = Callable[[], str]

_BASE36 = string.digits + string.ascii_lowercase


class AssessmentError(Exception):
    """A submission was rejected; the form stays editable."""


class MissingFieldError(AssessmentError):
    def __init__(self, fields: Sequence[str]):
        self.fields = tuple(fields)
        super().__init__(f"Please fill in all required fields: {', '.join(self.fields)}")


class DuplicateAssessmentError(AssessmentError):
    def __init__(self, existing: "AssessmentRecord"):
        self.existing = existing
        super().__init__(
            "This candidate has already been assessed by you for this group and case study"
        )


@dataclass(frozen=True)
class AssessmentForm:
    candidate_name: str = ""
    assessor_name: str = ""
    group_id: str = ""
    case_study: str = ""
    observations: str = ""


@dataclass(frozen=True)
class AssessmentRecord:
    id: str
    candidate_name: str
    assessor_name: str
    group_id: str
    case_study: str
    competency_scores: Mapping[str, int]
    marks: CompetencyMarks
    total_score: int
    performance_band: str
    observations: str
    timestamp: datetime

    @property
    def identity_key(self) -> Tuple[str, str, str, str]:
        return (self.candidate_name, self.assessor_name, self.group_id, self.case_study)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_assessment_id() -> str:
    suffix = "".join(secrets.choice(_BASE36) for _ in range(9))
    return f"ind-{int(time.time() * 1000)}-{suffix}"


def _is_blank(value: Optional[str]) -> bool:
    if value is None:
        return True
    if not isinstance(value, str):
        raise TypeError(f"Required fields must be strings; got {type(value).__name__}")
    return not value.strip()


def validate_required(candidate_name: str, assessor_name: str, group_id: str, case_study: str) -> None:
    values = (candidate_name, assessor_name, group_id, case_study)
    missing = [name for name, v in zip(REQUIRED_FIELDS, values) if _is_blank(v)]
    if missing:
        raise MissingFieldError(missing)


def find_duplicate(
    existing: Sequence[AssessmentRecord],
    candidate_name: str,
    assessor_name: str,
    group_id: str,
    case_study: str,
) -> Optional[AssessmentRecord]:
    key = (candidate_name, assessor_name, group_id, case_study)
    for record in existing:
        if record.identity_key == key:
            return record
    return None


def build(
    form: AssessmentForm,
    marks: CompetencyMarks,
    existing: Sequence[AssessmentRecord],
    clock: Clock = utc_now,
    id_generator: IdGenerator = new_assessment_id,
) -> AssessmentRecord:
    """Validate ``form`` and produce an assessment record.

    Raises MissingFieldError if a required field is empty and
    DuplicateAssessmentError if ``existing`` already holds a record for the
    same candidate, assessor, group and case study. ``existing`` is only read;
    appending the result is up to the caller.
    """
    try:
        validate_required(form.candidate_name, form.assessor_name, form.group_id, form.case_study)
    except MissingFieldError as e:
        logger.warning("Assessment rejected, missing fields: %s", ", ".join(e.fields))
        raise

    dup = find_duplicate(existing, form.candidate_name, form.assessor_name, form.group_id, form.case_study)
    if dup is not None:
        logger.warning(
            "Assessment rejected, duplicate of %s (candidate=%r, group=%r, case_study=%r)",
            dup.id, form.candidate_name, form.group_id, form.case_study,
        )
        raise DuplicateAssessmentError(dup)

    breakdown = score_marks(marks)
    record = AssessmentRecord(
        id=id_generator(),
        candidate_name=form.candidate_name,
        assessor_name=form.assessor_name,
        group_id=form.group_id,
        case_study=form.case_study,
        competency_scores=MappingProxyType(dict(breakdown.competency_scores)),
        marks=marks,
        total_score=breakdown.total_score,
        performance_band=breakdown.performance_band,
        observations=form.observations or "",
        timestamp=clock(),
    )
    logger.info(
        "Assessment %s accepted: %s scored %d/100 (%s)",
        record.id, record.candidate_name, record.total_score, record.performance_band,
    )
    return record
