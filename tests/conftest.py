import itertools
from datetime import datetime, timezone

import matplotlib
import pytest

matplotlib.use("Agg")

from future_ready.core.builder import AssessmentForm
from future_ready.core.catalog import COMPETENCIES, SUB_COMPETENCY_COUNT
from future_ready.core.marks import empty_marks, toggle_mark


FIXED_TIME = datetime(2025, 3, 14, 9, 30, tzinfo=timezone.utc)


def marks_with(n):
    """Marks with the first ``n`` slots ticked, filling competencies in catalog order."""
    marks = empty_marks()
    slots = [(c.key, i) for c in COMPETENCIES for i in range(SUB_COMPETENCY_COUNT)]
    for key, i in slots[:n]:
        marks = toggle_mark(marks, key, i)
    return marks


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TIME


@pytest.fixture
def sequential_ids():
    counter = itertools.count(1)
    return lambda: f"ind-test-{next(counter)}"


@pytest.fixture
def sample_form():
    return AssessmentForm(
        candidate_name="Ada Lovelace",
        assessor_name="Grace Hopper",
        group_id="Group A",
        case_study="Case Study 1",
        observations="Clear structure, strong on data.",
    )


@pytest.fixture
def make_marks():
    return marks_with
