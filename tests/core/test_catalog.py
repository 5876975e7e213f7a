"""
Tests for the fixed rubric catalog.
"""
import pytest

from future_ready.core.catalog import (
    COMPETENCIES,
    MAX_TOTAL_SCORE,
    SUB_COMPETENCY_COUNT,
    Competency,
    CompetencyKey,
    _validate_catalog,
    competency_index,
    get_competency,
    list_competencies,
)


def test_catalog_has_ten_by_ten():
    assert len(COMPETENCIES) == 10
    assert all(len(c.sub_competencies) == SUB_COMPETENCY_COUNT for c in COMPETENCIES)
    assert MAX_TOTAL_SCORE == 100


def test_catalog_order_is_stable():
    assert list_competencies() is COMPETENCIES
    assert COMPETENCIES[0].name == "Transformation Capacity"
    assert COMPETENCIES[-1].name == "Impact & Practicality"
    assert [c.key for c in COMPETENCIES] == list(CompetencyKey)


def test_get_competency_accepts_enum_or_string():
    by_enum = get_competency(CompetencyKey.COMMUNICATION)
    by_str = get_competency("communication")
    assert by_enum is by_str
    assert by_enum.sub_competencies[2] == "Listens actively"


def test_get_competency_unknown_key():
    with pytest.raises(KeyError):
        get_competency("publicSpeaking")


def test_competency_index():
    assert competency_index(CompetencyKey.TRANSFORMATION_CAPACITY) == 0
    assert competency_index("impactPracticality") == 9


def test_validate_rejects_short_competency():
    broken = COMPETENCIES[:-1] + (
        Competency(key=CompetencyKey.IMPACT_PRACTICALITY, name="Impact", sub_competencies=("only one",)),
    )
    with pytest.raises(ValueError, match="sub-competencies"):
        _validate_catalog(broken)


def test_validate_rejects_wrong_count():
    with pytest.raises(ValueError, match="10 competencies"):
        _validate_catalog(COMPETENCIES[:9])


def test_validate_rejects_duplicate_keys():
    with pytest.raises(ValueError, match="Duplicate"):
        _validate_catalog(COMPETENCIES[:9] + (COMPETENCIES[0],))
