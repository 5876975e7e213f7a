from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple, Union

from .catalog import COMPETENCIES, CompetencyKey
from .marks import CompetencyMarks


EXCEPTIONAL = "Exceptional"
STRONG = "Strong"
DEVELOPING = "Developing"
LIMITED = "Limited"

# (lower bound inclusive, band), highest first
BAND_THRESHOLDS: Tuple[Tuple[int, str], ...] = (
    (80, EXCEPTIONAL),
    (60, STRONG),
    (40, DEVELOPING),
)

BANDS: Tuple[str, ...] = (EXCEPTIONAL, STRONG, DEVELOPING, LIMITED)


@dataclass(frozen=True)
class ScoreBreakdown:
    competency_scores: Dict[str, int]
    total_score: int
    performance_band: str


def score_competency(marks: CompetencyMarks, competency_key: Union[CompetencyKey, str]) -> int:
    return sum(1 for v in marks.row(competency_key) if v)


def compute_competency_scores(marks: CompetencyMarks) -> Dict[str, int]:
    return {c.key.value: score_competency(marks, c.key) for c in COMPETENCIES}


def score_total(marks: CompetencyMarks) -> int:
    total = 0
    for c in COMPETENCIES:
        total += score_competency(marks, c.key)
    return total


def classify_band(total_score: int) -> str:
    for lower, band in BAND_THRESHOLDS:
        if total_score >= lower:
            return band
    return LIMITED


def score_marks(marks: CompetencyMarks) -> ScoreBreakdown:
    cs = compute_competency_scores(marks)
    total = sum(cs.values())
    return ScoreBreakdown(competency_scores=cs, total_score=total, performance_band=classify_band(total))
