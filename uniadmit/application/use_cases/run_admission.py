from __future__ import annotations

from typing import Optional, TextIO

from uniadmit.config.config import Settings
from uniadmit.config.logger import logger
from uniadmit.domain.models import AdmissionOutcome
from uniadmit.infrastructure.io.admission_writer import write_admissions
from uniadmit.infrastructure.io.applicants_reader import read_applicants
from uniadmit.infrastructure.io.quota_reader import resolve_quota
from uniadmit.presentation.console_report import print_admission_report
from uniadmit.services.admission_waves import AllocationDriver
from uniadmit.services.scoring import Ranker, ScoreCalculator


class RunAdmissionUseCase:
    """
    Один полный прогон:
        1. квота (из настроек или stdin)
        2. список абитуриентов из файла
        3. распределение по волнам
        4. отчёт в консоль и файлы по факультетам

    Любая ошибка на шагах 1–2 прерывает прогон до распределения.
    """

    def __init__(self, settings: Settings, stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None):
        self._settings = settings
        self._stdin = stdin
        self._stdout = stdout
        self._ranker = Ranker(ScoreCalculator(settings.subject_map))

    @property
    def ranker(self) -> Ranker:
        return self._ranker

    def execute(self) -> AdmissionOutcome:
        s = self._settings

        quota = resolve_quota(s.quota, self._stdin)
        applicants = read_applicants(s.applicants_path, s.subjects, s.admission_stages)
        departments = s.departments(quota)

        logger.info("→ Квота %d, факультеты: %s", quota, ", ".join(d.name for d in departments))
        driver = AllocationDriver(self._ranker, stages=s.admission_stages)
        outcome = driver.run(applicants, departments)

        if s.report_to_console:
            print_admission_report(outcome, departments, self._ranker, self._stdout)
        write_admissions(outcome, departments, self._ranker, s.results_dir)
        return outcome
