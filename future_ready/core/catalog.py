from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


SUB_COMPETENCY_COUNT = 10
COMPETENCY_COUNT = 10
MAX_TOTAL_SCORE = SUB_COMPETENCY_COUNT * COMPETENCY_COUNT


class CompetencyKey(str, Enum):
    TRANSFORMATION_CAPACITY = "transformationCapacity"
    INNOVATION_CREATIVITY = "innovationCreativity"
    FUTURE_FOCUSED_SKILLS = "futureFocusedSkills"
    LEADERSHIP_INFLUENCE = "leadershipInfluence"
    AI_LITERACY_DIGITAL_FLUENCY = "aiLiteracyDigitalFluency"
    ANALYTICAL_THINKING = "analyticalThinking"
    PROBLEM_SOLVING = "problemSolving"
    COMMUNICATION = "communication"
    COLLABORATION = "collaboration"
    IMPACT_PRACTICALITY = "impactPracticality"


@dataclass(frozen=True)
class Competency:
    key: CompetencyKey
    name: str
    sub_competencies: Tuple[str, ...]


COMPETENCIES: Tuple[Competency, ...] = (
    Competency(
        key=CompetencyKey.TRANSFORMATION_CAPACITY,
        name="Transformation Capacity",
        sub_competencies=(
            "Adapts quickly to new challenges",
            "Seeks opportunities for change",
            "Questions existing processes",
            "Encourages others to embrace change",
            "Stays resilient under uncertainty",
            "Balances short- and long-term transformation",
            "Identifies systemic barriers and suggests solutions",
            "Integrates new ideas into practice",
            "Demonstrates flexibility in roles/tasks",
            "Champions continuous improvement",
        ),
    ),
    Competency(
        key=CompetencyKey.INNOVATION_CREATIVITY,
        name="Innovation & Creativity",
        sub_competencies=(
            "Proposes unique ideas",
            "Connects unrelated concepts",
            'Thinks "out of the box"',
            "Uses creative problem-solving methods",
            "Builds on others' ideas constructively",
            "Balances creativity with practicality",
            "Open to experimentation/failure",
            "Identifies novel opportunities",
            "Applies creativity across disciplines",
            "Demonstrates originality in approach",
        ),
    ),
    Competency(
        key=CompetencyKey.FUTURE_FOCUSED_SKILLS,
        name="Future-Focused Skills",
        sub_competencies=(
            "Uses digital tools effectively",
            "Demonstrates global/cultural awareness",
            "Practices systems thinking",
            "Shows adaptability to emerging roles",
            "Applies critical thinking to new contexts",
            "Displays growth mindset",
            "Uses collaboration tools",
            "Demonstrates agility in learning",
            "Integrates sustainability/responsibility",
            "Keeps updated with future trends",
        ),
    ),
    Competency(
        key=CompetencyKey.LEADERSHIP_INFLUENCE,
        name="Leadership & Influence",
        sub_competencies=(
            "Provides clear direction",
            "Inspires others with vision",
            "Delegates effectively",
            "Encourages inclusivity",
            "Resolves conflict constructively",
            "Takes initiative",
            "Motivates peers positively",
            "Builds trust with the team",
            "Shows accountability in decisions",
            "Supports others' development",
        ),
    ),
    Competency(
        key=CompetencyKey.AI_LITERACY_DIGITAL_FLUENCY,
        name="AI Literacy & Digital Fluency",
        sub_competencies=(
            "Understands AI basics",
            "Identifies ethical issues in AI use",
            "Applies AI tools effectively",
            "Uses data responsibly",
            "Evaluates AI outputs critically",
            "Integrates digital tools in workflows",
            "Seeks opportunities for AI use",
            "Recognizes bias/limitations in AI",
            "Communicates AI insights clearly",
            "Stays curious about emerging tech",
        ),
    ),
    Competency(
        key=CompetencyKey.ANALYTICAL_THINKING,
        name="Analytical Thinking",
        sub_competencies=(
            "Identifies key elements in problems",
            "Uses evidence/data in decisions",
            "Recognizes assumptions",
            "Draws logical conclusions",
            "Prioritizes effectively",
            "Spots gaps or inconsistencies",
            "Identifies root causes",
            "Structures analysis clearly",
            "Links cause-effect relationships",
            "Applies analytical frameworks",
        ),
    ),
    Competency(
        key=CompetencyKey.PROBLEM_SOLVING,
        name="Problem-Solving",
        sub_competencies=(
            "Defines the problem clearly",
            "Generates multiple solutions",
            "Chooses the most feasible option",
            "Applies structured steps",
            "Tests solutions before implementation",
            "Learns from past solutions",
            "Involves others in solving",
            "Evaluates risks and trade-offs",
            "Stays solution-oriented under pressure",
            "Implements solutions effectively",
        ),
    ),
    Competency(
        key=CompetencyKey.COMMUNICATION,
        name="Communication",
        sub_competencies=(
            "Speaks with clarity",
            "Uses persuasive arguments",
            "Listens actively",
            "Adapts to audience",
            "Uses non-verbal cues effectively",
            "Communicates confidently",
            "Structures ideas logically",
            "Uses data/stories to support points",
            "Responds effectively in discussions",
            "Writes concisely and clearly",
        ),
    ),
    Competency(
        key=CompetencyKey.COLLABORATION,
        name="Collaboration",
        sub_competencies=(
            "Actively contributes in teams",
            "Listens respectfully",
            "Values diverse perspectives",
            "Shares credit fairly",
            "Provides constructive feedback",
            "Seeks input before deciding",
            "Supports team goals over personal",
            "Builds positive team climate",
            "Resolves disagreements respectfully",
            "Demonstrates reliability",
        ),
    ),
    Competency(
        key=CompetencyKey.IMPACT_PRACTICALITY,
        name="Impact & Practicality",
        sub_competencies=(
            "Aligns work with real needs",
            "Recommends actionable steps",
            "Demonstrates feasibility",
            "Adds measurable value",
            "Links ideas to outcomes",
            "Provides evidence for recommendations",
            "Balances innovation with practicality",
            "Identifies short- vs long-term impact",
            "Evaluates sustainability of solutions",
            "Ensures recommendations are implementable",
        ),
    ),
)


def _validate_catalog(competencies: Tuple[Competency, ...]) -> None:
    if len(competencies) != COMPETENCY_COUNT:
        raise ValueError(f"Catalog must define {COMPETENCY_COUNT} competencies; got {len(competencies)}")
    seen = set()
    for c in competencies:
        if c.key in seen:
            raise ValueError(f"Duplicate competency key: {c.key.value}")
        seen.add(c.key)
        n = len(c.sub_competencies)
        if n != SUB_COMPETENCY_COUNT:
            raise ValueError(f"{c.name} must have {SUB_COMPETENCY_COUNT} sub-competencies; got {n}")


_validate_catalog(COMPETENCIES)

_BY_KEY = {c.key: c for c in COMPETENCIES}


def list_competencies() -> Tuple[Competency, ...]:
    return COMPETENCIES


def get_competency(key: Union[CompetencyKey, str]) -> Competency:
    """Look up a competency by enum member or its string value. Raises KeyError if unknown."""
    try:
        k = CompetencyKey(key)
    except ValueError:
        raise KeyError(key) from None
    return _BY_KEY[k]


def competency_index(key: Union[CompetencyKey, str]) -> int:
    """Position of the competency in catalog order."""
    return COMPETENCIES.index(get_competency(key))
