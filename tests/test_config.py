import json
import logging

import pytest

from future_ready import config
from future_ready.config import COHORT_PATH, configure_logging, load_cohort, load_json


def test_bundled_cohort_loads():
    cohort = load_cohort(COHORT_PATH)
    assert cohort.groups
    assert cohort.case_studies
    assert "Group A" in cohort.groups


def test_load_cohort_from_file(tmp_path):
    path = tmp_path / "cohort.json"
    path.write_text(json.dumps({"groups": ["G1", "G2"], "case_studies": ["CS"]}), encoding="utf-8")
    cohort = load_cohort(path)
    assert cohort.groups == ["G1", "G2"]
    assert cohort.case_studies == ["CS"]


@pytest.mark.parametrize("payload", [
    {"groups": "G1", "case_studies": []},
    {"groups": ["G1", ""], "case_studies": ["CS"]},
    {"groups": ["G1"], "case_studies": [3]},
])
def test_load_cohort_rejects_bad_lists(tmp_path, payload):
    path = tmp_path / "cohort.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(ValueError):
        load_cohort(path)


def test_load_json_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_json(tmp_path / "nope.json")


def test_configure_logging_uses_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    configure_logging("debug")
    assert calls["level"] == "DEBUG"
    assert calls["format"] == config.LOG_FORMAT
