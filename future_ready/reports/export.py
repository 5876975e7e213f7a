from __future__ import annotations
from typing import Any, Dict, List, Sequence
import csv
import io

from ..core.builder import AssessmentRecord
from ..core.catalog import COMPETENCIES


def build_report(record: AssessmentRecord) -> Dict[str, Any]:
    competency_scores_named = []
    for c in COMPETENCIES:
        competency_scores_named.append((c.name, int(record.competency_scores.get(c.key.value, 0))))

    return {
        "id": record.id,
        "generated_at": record.timestamp.isoformat(timespec="seconds"),
        "candidate_name": record.candidate_name,
        "assessor_name": record.assessor_name,
        "group_id": record.group_id,
        "case_study": record.case_study,
        "total_score": record.total_score,
        "performance_band": record.performance_band,
        "competency_scores": dict(record.competency_scores),
        "competency_scores_named": competency_scores_named,
        "marks": record.marks.as_int_lists(),
        "observations": record.observations,
    }


def csv_headers() -> List[str]:
    return (
        ["Candidate Name", "Assessor Name", "Group", "Case Study"]
        + [c.name for c in COMPETENCIES]
        + ["Total Score", "Performance Band", "Observations", "Timestamp"]
    )


def records_to_csv(records: Sequence[AssessmentRecord]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(csv_headers())
    for r in records:
        writer.writerow(
            [r.candidate_name, r.assessor_name, r.group_id, r.case_study]
            + [int(r.competency_scores.get(c.key.value, 0)) for c in COMPETENCIES]
            + [r.total_score, r.performance_band, r.observations, r.timestamp.isoformat()]
        )
    return buf.getvalue()
