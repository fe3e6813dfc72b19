# uniadmit/services/scoring.py
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping, Sequence

from uniadmit.domain.exceptions import UnknownDepartmentError
from uniadmit.domain.models import Applicant


class ScoreCalculator:
    """
    Баллы абитуриента для конкретного факультета:
      • subject_mean_score: среднее по профильным предметам факультета;
      • effective_score: лучшее из среднего и общего вступительного.
    Таблица «факультет → предметы» передаётся снаружи и не меняется.
    """

    def __init__(self, subject_map: Mapping[str, Sequence[str]]):
        self._subjects = MappingProxyType({dep: tuple(subj) for dep, subj in subject_map.items()})

    @property
    def subject_map(self) -> Mapping[str, tuple[str, ...]]:
        return self._subjects

    def subjects_for(self, department: str) -> tuple[str, ...]:
        try:
            return self._subjects[department]
        except KeyError:
            raise UnknownDepartmentError(f"Неизвестный факультет: {department}", department) from None

    def subject_mean_score(self, applicant: Applicant, department: str) -> float:
        subjects = self.subjects_for(department)
        total = sum(applicant.score_for(subj) for subj in subjects)
        # делим на число предметов факультета, а не абитуриента
        return total / len(subjects)

    def effective_score(self, applicant: Applicant, department: str) -> float:
        return max(self.subject_mean_score(applicant, department), applicant.entrance_score)


class Ranker:
    """Сортировка: лучший балл по убыванию, затем имя по возрастанию."""

    def __init__(self, calculator: ScoreCalculator):
        self._calc = calculator

    @property
    def calculator(self) -> ScoreCalculator:
        return self._calc

    def sort_key(self, department: str):
        calc = self._calc
        return lambda a: (-calc.effective_score(a, department), a.full_name)

    def rank(self, applicants: Iterable[Applicant], department: str) -> List[Applicant]:
        return sorted(applicants, key=self.sort_key(department))
