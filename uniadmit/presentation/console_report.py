"""
Человекочитаемый отчёт: по каждому факультету зачисленные
со средним баллом по профильным предметам (один знак после запятой).
"""
import sys
from typing import Optional, Sequence, TextIO

from uniadmit.domain.models import AdmissionOutcome, Department
from uniadmit.services.scoring import Ranker


def render_admission_report(outcome: AdmissionOutcome, departments: Sequence[Department],
                            ranker: Ranker) -> str:
    calc = ranker.calculator
    lines = []
    for dep in departments:
        lines.append(dep.name)
        for a in ranker.rank(outcome.roster.get(dep.name, ()), dep.name):
            lines.append(f"{a.full_name} {calc.subject_mean_score(a, dep.name):.1f}")
        lines.append("")
    return "\n".join(lines) + "\n"


def print_admission_report(outcome: AdmissionOutcome, departments: Sequence[Department],
                           ranker: Ranker, stream: Optional[TextIO] = None) -> None:
    (stream or sys.stdout).write(render_admission_report(outcome, departments, ranker))
