# uniadmit/services/admission_waves.py
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Sequence, Tuple

from uniadmit.config.logger import logger
from uniadmit.domain.exceptions import DuplicateApplicantError
from uniadmit.domain.models import AdmissionOutcome, Applicant, Department, WaveReport
from uniadmit.services.scoring import Ranker

Roster = Dict[str, List[Applicant]]


class WaveAllocator:
    """
    Одна волна распределения:
      1. делим оставшихся по факультету из приоритета `wave`;
      2. каждый факультет сортирует своих и берёт сколько влезает в квоту;
      3. только после всех факультетов разом убираем зачисленных из пула.
    Факультеты, которых нет в списке, просто не дают совпадения.
    """

    def __init__(self, ranker: Ranker):
        self._ranker = ranker

    def partition(self, wave: int, departments: Sequence[Department],
                  remaining: Iterable[Applicant]) -> Dict[str, List[Applicant]]:
        groups: Dict[str, List[Applicant]] = {d.name: [] for d in departments}
        for applicant in remaining:
            dep = applicant.preference(wave)
            if dep not in groups:
                logger.debug("волна %d: %s выбрал неизвестный факультет %r — пропускаем",
                             wave, applicant.full_name, dep)
                continue
            groups[dep].append(applicant)
        return groups

    def select(self, wave: int, departments: Sequence[Department], roster: Roster,
               groups: Dict[str, List[Applicant]]) -> Dict[str, Tuple[Applicant, ...]]:
        """Кого берёт каждый факультет на этой волне. Ни roster, ни пул не меняются."""
        chosen: Dict[str, Tuple[Applicant, ...]] = {}
        for dep in departments:
            candidates = groups.get(dep.name, [])
            capacity = dep.quota - len(roster.get(dep.name, []))
            if not candidates or capacity <= 0:
                logger.debug("волна %d: %s — желающих %d, мест %d, пропускаем",
                             wave, dep.name, len(candidates), max(capacity, 0))
                continue
            ranked = self._ranker.rank(candidates, dep.name)
            chosen[dep.name] = tuple(ranked[:capacity])
            logger.debug("волна %d: %s — желающих %d, мест %d, зачислено %d",
                         wave, dep.name, len(candidates), capacity, len(chosen[dep.name]))
        return chosen

    def allocate(self, wave: int, departments: Sequence[Department], roster: Roster,
                 remaining: Sequence[Applicant]) -> Tuple[Roster, List[Applicant], WaveReport]:
        groups = self.partition(wave, departments, remaining)
        chosen = self.select(wave, departments, roster, groups)

        # фиксация волны: пополняем списки и одним шагом чистим пул
        admitted_names = set()
        for dep_name, applicants in chosen.items():
            roster.setdefault(dep_name, []).extend(applicants)
            admitted_names.update(a.full_name for a in applicants)
        still_remaining = [a for a in remaining if a.full_name not in admitted_names]

        report = WaveReport(
            wave=wave,
            admitted=MappingProxyType(dict(chosen)),
            remaining_count=len(still_remaining),
        )
        return roster, still_remaining, report


class AllocationDriver:
    """
    Прогоняет WaveAllocator по волнам 0..stages-1.
    После последней волны оставшиеся в пуле считаются не поступившими:
    повторов и перераспределения нет.
    """

    def __init__(self, ranker: Ranker, stages: int = 3):
        if stages < 1:
            raise ValueError("stages должно быть >= 1")
        self._ranker = ranker
        self._allocator = WaveAllocator(ranker)
        self._stages = stages

    @property
    def stages(self) -> int:
        return self._stages

    @staticmethod
    def _check_unique(applicants: Sequence[Applicant]) -> None:
        seen = set()
        for a in applicants:
            if a.full_name in seen:
                raise DuplicateApplicantError(f"Повторяющееся имя абитуриента: {a.full_name}", a.full_name)
            seen.add(a.full_name)

    def run(self, applicants: Sequence[Applicant], departments: Sequence[Department]) -> AdmissionOutcome:
        self._check_unique(applicants)
        # факультет без профильных предметов нельзя ранжировать: падаем до первой волны
        for dep in departments:
            self._ranker.calculator.subjects_for(dep.name)

        roster: Roster = {d.name: [] for d in departments}
        remaining: List[Applicant] = list(applicants)
        reports: List[WaveReport] = []

        logger.info("Распределение: %d абитуриентов, %d факультетов, волн %d",
                    len(remaining), len(departments), self._stages)

        for wave in range(self._stages):
            roster, remaining, report = self._allocator.allocate(wave, departments, roster, remaining)
            reports.append(report)
            logger.info("→ волна %d: зачислено %d, осталось %d",
                        wave, report.admitted_count, report.remaining_count)

        outcome = AdmissionOutcome(
            roster=MappingProxyType({dep: tuple(lst) for dep, lst in roster.items()}),
            unplaced=tuple(remaining),
            waves=tuple(reports),
        )
        logger.info("Распределение завершено: зачислено %d, без места %d",
                    outcome.admitted_count, len(outcome.unplaced))
        return outcome
