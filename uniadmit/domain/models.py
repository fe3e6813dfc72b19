from dataclasses import dataclass, field
from typing import Mapping

from uniadmit.domain.exceptions import MissingSubjectScoreError


@dataclass(frozen=True)
class ExamScore:
    """
    Результат профильного экзамена.
    """
    subject: str  # 'Physics', 'Math', …
    score: float


@dataclass(frozen=True)
class Applicant:
    """
    Абитуриент. Полное имя считается уникальным в пределах запуска.
    """
    full_name: str  # 'Имя Фамилия'
    entrance_score: float  # общий вступительный экзамен
    exam_scores: tuple[ExamScore, ...]  # в порядке глобального списка предметов
    preferences: tuple[str, ...]  # факультеты по приоритету, [0] самый желанный

    def score_for(self, subject: str) -> float:
        for exam in self.exam_scores:
            if exam.subject == subject:
                return exam.score
        raise MissingSubjectScoreError(
            f"У абитуриента {self.full_name} нет балла по предмету {subject}",
            applicant=self.full_name,
            subject=subject,
        )

    def preference(self, wave: int) -> str | None:
        """Факультет, выбранный на волне `wave`, или None, если приоритетов меньше."""
        if 0 <= wave < len(self.preferences):
            return self.preferences[wave]
        return None


@dataclass(frozen=True)
class Department:
    """
    Факультет и его квота мест. Профильные предметы живут в таблице
    ScoreCalculator, а не здесь.
    """
    name: str
    quota: int


@dataclass(frozen=True)
class WaveReport:
    """
    Итог одной волны: кого зачислили (по факультетам) и сколько осталось.
    """
    wave: int
    admitted: Mapping[str, tuple[Applicant, ...]]
    remaining_count: int

    @property
    def admitted_count(self) -> int:
        return sum(len(v) for v in self.admitted.values())


@dataclass(frozen=True)
class AdmissionOutcome:
    """
    Замороженный результат распределения после последней волны.
    """
    roster: Mapping[str, tuple[Applicant, ...]]  # факультет → зачисленные (в порядке зачисления)
    unplaced: tuple[Applicant, ...]
    waves: tuple[WaveReport, ...] = field(default_factory=tuple)

    def department_of(self, full_name: str) -> str | None:
        for dep, admitted in self.roster.items():
            if any(a.full_name == full_name for a in admitted):
                return dep
        return None

    @property
    def admitted_count(self) -> int:
        return sum(len(v) for v in self.roster.values())
