import random

import pytest

from future_ready.core.catalog import COMPETENCIES, CompetencyKey
from future_ready.core.marks import empty_marks, toggle_mark
from future_ready.core.scoring import (
    classify_band,
    compute_competency_scores,
    score_competency,
    score_marks,
    score_total,
)


@pytest.mark.parametrize("score,band", [
    (0, "Limited"),
    (39, "Limited"),
    (40, "Developing"),
    (59, "Developing"),
    (60, "Strong"),
    (79, "Strong"),
    (80, "Exceptional"),
    (100, "Exceptional"),
])
def test_band_boundaries(score, band):
    assert classify_band(score) == band


def test_band_is_total_over_range():
    for s in range(0, 101):
        assert classify_band(s) in {"Exceptional", "Strong", "Developing", "Limited"}


def test_score_competency_counts_true_slots():
    m = empty_marks()
    for i in (0, 2, 4):
        m = toggle_mark(m, CompetencyKey.LEADERSHIP_INFLUENCE, i)
    assert score_competency(m, CompetencyKey.LEADERSHIP_INFLUENCE) == 3
    assert score_competency(m, "communication") == 0


def test_score_total_matches_true_count():
    rng = random.Random(7)
    m = empty_marks()
    for _ in range(250):
        m = toggle_mark(m, rng.choice(COMPETENCIES).key, rng.randrange(10))
        total = score_total(m)
        assert total == m.count_checked()
        assert 0 <= total <= 100


def test_full_marks(make_marks):
    m = make_marks(100)
    assert score_total(m) == 100
    assert all(v == 10 for v in compute_competency_scores(m).values())


def test_score_marks_breakdown(make_marks):
    b = score_marks(make_marks(42))
    assert b.total_score == 42
    assert b.performance_band == "Developing"
    assert list(b.competency_scores) == [c.key.value for c in COMPETENCIES]
    assert b.competency_scores["transformationCapacity"] == 10
    assert b.competency_scores["leadershipInfluence"] == 10
    assert b.competency_scores["aiLiteracyDigitalFluency"] == 2
    assert b.competency_scores["impactPracticality"] == 0
