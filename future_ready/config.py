from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional
import json
import logging
import os


logger = logging.getLogger(__name__)


# ----------------------------
# Paths / Config
# ----------------------------
ROOT = Path(__file__).resolve().parent      # the package directory
DATA_DIR = ROOT.parent / "data"              # project-root /data

COHORT_PATH = Path(os.getenv("FUTURE_READY_COHORT_PATH", str(DATA_DIR / "cohort_v1.json")))
LOG_LEVEL = os.getenv("FUTURE_READY_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


@dataclass(frozen=True)
class Cohort:
    groups: List[str]
    case_studies: List[str]


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)


def load_json(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Missing file: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _string_list(raw: Dict[str, Any], field: str) -> List[str]:
    values = raw.get(field, [])
    if not isinstance(values, list) or not all(isinstance(v, str) and v.strip() for v in values):
        raise ValueError(f"'{field}' must be a list of non-empty strings")
    return list(values)


def load_cohort(path: Path = COHORT_PATH) -> Cohort:
    """Groups and case studies offered by the assessment form."""
    raw = load_json(Path(path))
    cohort = Cohort(
        groups=_string_list(raw, "groups"),
        case_studies=_string_list(raw, "case_studies"),
    )
    logger.debug("Loaded cohort from %s: %d groups, %d case studies",
                 path, len(cohort.groups), len(cohort.case_studies))
    return cohort
