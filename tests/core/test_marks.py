import pytest

from future_ready.core.catalog import COMPETENCIES, CompetencyKey
from future_ready.core.marks import (
    CompetencyMarks,
    MarkOutOfRangeError,
    empty_marks,
    marks_from_mapping,
    toggle_mark,
)


def _flat(marks):
    return [v for row in marks.rows for v in row]


def test_empty_marks_all_false():
    m = empty_marks()
    assert len(_flat(m)) == 100
    assert not any(_flat(m))
    assert m.count_checked() == 0


def test_toggle_flips_exactly_one_slot():
    before = empty_marks()
    after = toggle_mark(before, CompetencyKey.COLLABORATION, 3)
    diffs = [i for i, (a, b) in enumerate(zip(_flat(before), _flat(after))) if a != b]
    assert len(diffs) == 1
    assert after.row(CompetencyKey.COLLABORATION)[3] is True
    # original left untouched
    assert before.row(CompetencyKey.COLLABORATION)[3] is False


@pytest.mark.parametrize("key", [c.key for c in COMPETENCIES])
@pytest.mark.parametrize("index", [0, 5, 9])
def test_toggle_twice_restores(key, index):
    start = toggle_mark(empty_marks(), CompetencyKey.PROBLEM_SOLVING, 1)
    assert toggle_mark(toggle_mark(start, key, index), key, index) == start


def test_toggle_accepts_string_key():
    m = toggle_mark(empty_marks(), "analyticalThinking", 0)
    assert m.row(CompetencyKey.ANALYTICAL_THINKING)[0] is True


@pytest.mark.parametrize("index", [-1, 10, 100])
def test_toggle_index_out_of_range(index):
    with pytest.raises(MarkOutOfRangeError):
        toggle_mark(empty_marks(), CompetencyKey.COMMUNICATION, index)


def test_toggle_unknown_key():
    with pytest.raises(MarkOutOfRangeError):
        toggle_mark(empty_marks(), "publicSpeaking", 0)


def test_out_of_range_is_an_index_error():
    assert issubclass(MarkOutOfRangeError, IndexError)


def test_marks_shape_is_enforced():
    with pytest.raises(ValueError):
        CompetencyMarks(rows=((False,) * 10,) * 9)
    with pytest.raises(ValueError):
        CompetencyMarks(rows=((False,) * 9,) * 10)


def test_marks_from_mapping_and_int_lists():
    m = marks_from_mapping({"communication": [1, 0, 1, 0, 0, 0, 0, 0, 0, 1]})
    assert m.count_checked() == 3
    lists = m.as_int_lists()
    assert lists["communication"] == [1, 0, 1, 0, 0, 0, 0, 0, 0, 1]
    assert lists["collaboration"] == [0] * 10
    assert list(lists) == [c.key.value for c in COMPETENCIES]


def test_marks_from_mapping_rejects_unknown_key():
    with pytest.raises(ValueError, match="Unknown competency"):
        marks_from_mapping({"publicSpeaking": [True] * 10})


def test_list_rows_are_copied():
    rows = [[False] * 10 for _ in range(10)]
    m = CompetencyMarks(rows=rows)
    rows[0][0] = True
    assert m.count_checked() == 0
    assert isinstance(m.rows, tuple)
    assert all(isinstance(row, tuple) for row in m.rows)


def test_list_rows_can_be_toggled():
    m = CompetencyMarks(rows=[[0] * 10 for _ in range(10)])
    toggled = toggle_mark(m, CompetencyKey.COMMUNICATION, 0)
    assert toggled.row(CompetencyKey.COMMUNICATION)[0] is True
    assert toggled.count_checked() == 1
    assert m == empty_marks()
