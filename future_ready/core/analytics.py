from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .builder import AssessmentRecord
from .catalog import COMPETENCIES
from .scoring import BANDS


@dataclass(frozen=True)
class Heatmap:
    columns: List[str]
    # competency name -> column label -> average score (0-10); cells with no data are absent
    cells: Dict[str, Dict[str, float]]


@dataclass(frozen=True)
class Performer:
    candidate_name: str
    average_score: float
    assessment_count: int
    best_band: str


def _round1(x: float) -> float:
    return round(x * 10) / 10


def column_label(case_study: str, group_id: str) -> str:
    return f"{case_study} / {group_id}"


def filter_assessments(
    records: Iterable[AssessmentRecord],
    group_id: Optional[str] = None,
    case_study: Optional[str] = None,
) -> List[AssessmentRecord]:
    out: List[AssessmentRecord] = []
    for r in records:
        if group_id is not None and r.group_id != group_id:
            continue
        if case_study is not None and r.case_study != case_study:
            continue
        out.append(r)
    return out


def competency_heatmap(records: Sequence[AssessmentRecord]) -> Heatmap:
    """Average competency score per (case study, group), columns in first-seen order."""
    buckets: Dict[Tuple[str, str], List[AssessmentRecord]] = {}
    for r in records:
        buckets.setdefault((r.case_study, r.group_id), []).append(r)

    columns = [column_label(cs, g) for cs, g in buckets]
    cells: Dict[str, Dict[str, float]] = {}
    for c in COMPETENCIES:
        row: Dict[str, float] = {}
        for (cs, g), rs in buckets.items():
            avg = sum(r.competency_scores.get(c.key.value, 0) for r in rs) / len(rs)
            row[column_label(cs, g)] = _round1(avg)
        cells[c.name] = row
    return Heatmap(columns=columns, cells=cells)


def top_performers(records: Sequence[AssessmentRecord], k: int = 5) -> List[Performer]:
    by_candidate: Dict[str, List[AssessmentRecord]] = {}
    for r in records:
        by_candidate.setdefault(r.candidate_name, []).append(r)

    performers: List[Performer] = []
    for name, rs in by_candidate.items():
        best = rs[0]
        for r in rs[1:]:
            if r.total_score > best.total_score:
                best = r
        performers.append(Performer(
            candidate_name=name,
            average_score=_round1(sum(r.total_score for r in rs) / len(rs)),
            assessment_count=len(rs),
            best_band=best.performance_band,
        ))
    # stable sort keeps first-seen order on ties
    performers.sort(key=lambda p: -p.average_score)
    return performers[:k]


def band_distribution(records: Iterable[AssessmentRecord]) -> Dict[str, int]:
    counts = {b: 0 for b in BANDS}
    for r in records:
        counts[r.performance_band] = counts.get(r.performance_band, 0) + 1
    return counts
