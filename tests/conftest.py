import pytest

from uniadmit.config.config import DEFAULT_DEPARTMENT_SUBJECTS, DEFAULT_SUBJECTS
from uniadmit.domain.models import Applicant, Department, ExamScore
from uniadmit.services.scoring import Ranker, ScoreCalculator


def make_applicant(name, entrance=0.0, scores=None, prefs=("Physics", "Chemistry", "Biotech")):
    """
    scores: {subject: score}; не указанные предметы получают 0.
    """
    scores = scores or {}
    return Applicant(
        full_name=name,
        entrance_score=float(entrance),
        exam_scores=tuple(ExamScore(s, float(scores.get(s, 0))) for s in DEFAULT_SUBJECTS),
        preferences=tuple(prefs),
    )


def make_departments(quota, names=None):
    names = names or list(DEFAULT_DEPARTMENT_SUBJECTS)
    return tuple(Department(n, quota) for n in names)


@pytest.fixture
def calculator():
    return ScoreCalculator(DEFAULT_DEPARTMENT_SUBJECTS)


@pytest.fixture
def ranker(calculator):
    return Ranker(calculator)
