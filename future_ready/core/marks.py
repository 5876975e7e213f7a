from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Sequence, Tuple, Union

from .catalog import COMPETENCIES, SUB_COMPETENCY_COUNT, CompetencyKey, competency_index


class MarkOutOfRangeError(IndexError):
    """Raised for a competency key or sub-competency index outside the catalog."""


Slots = Tuple[bool, ...]


@dataclass(frozen=True)
class CompetencyMarks:
    """Ticked sub-competencies, one 10-slot row per competency in catalog order."""

    rows: Tuple[Slots, ...]

    def __post_init__(self):
        # copy into bools so caller-owned lists cannot change the marks later
        object.__setattr__(self, "rows", tuple(tuple(bool(v) for v in row) for row in self.rows))
        if len(self.rows) != len(COMPETENCIES):
            raise ValueError(f"Expected {len(COMPETENCIES)} rows; got {len(self.rows)}")
        for row in self.rows:
            if len(row) != SUB_COMPETENCY_COUNT:
                raise ValueError(f"Each row must have {SUB_COMPETENCY_COUNT} slots; got {len(row)}")

    def row(self, key: Union[CompetencyKey, str]) -> Slots:
        return self.rows[_row_index(key)]

    def items(self) -> Iterator[Tuple[CompetencyKey, Slots]]:
        for c, row in zip(COMPETENCIES, self.rows):
            yield c.key, row

    def count_checked(self) -> int:
        return sum(sum(1 for v in row if v) for row in self.rows)

    def as_int_lists(self) -> Dict[str, list]:
        # 0/1 per slot, keyed by competency key string
        return {key.value: [1 if v else 0 for v in row] for key, row in self.items()}


def empty_marks() -> CompetencyMarks:
    return CompetencyMarks(rows=tuple((False,) * SUB_COMPETENCY_COUNT for _ in COMPETENCIES))


def marks_from_mapping(data: Mapping[str, Sequence[object]]) -> CompetencyMarks:
    """Build marks from a {competency key: 10 truthy/falsy values} mapping; missing keys are all false."""
    rows = []
    for c in COMPETENCIES:
        values = data.get(c.key.value, [False] * SUB_COMPETENCY_COUNT)
        rows.append(tuple(bool(v) for v in values))
    unknown = set(data) - {c.key.value for c in COMPETENCIES}
    if unknown:
        raise ValueError(f"Unknown competency keys: {sorted(unknown)}")
    return CompetencyMarks(rows=tuple(rows))


def _row_index(key: Union[CompetencyKey, str]) -> int:
    try:
        return competency_index(key)
    except KeyError:
        raise MarkOutOfRangeError(f"Unknown competency key: {key!r}") from None


def toggle_mark(marks: CompetencyMarks, competency_key: Union[CompetencyKey, str], index: int) -> CompetencyMarks:
    r = _row_index(competency_key)
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < SUB_COMPETENCY_COUNT:
        raise MarkOutOfRangeError(f"Sub-competency index must be in [0, {SUB_COMPETENCY_COUNT}); got {index!r}")
    row = marks.rows[r]
    new_row = row[:index] + (not row[index],) + row[index + 1:]
    return CompetencyMarks(rows=marks.rows[:r] + (new_row,) + marks.rows[r + 1:])
