# uniadmit/infrastructure/io/admission_writer.py
from pathlib import Path
from typing import List, Sequence

from uniadmit.config.logger import logger
from uniadmit.domain.models import AdmissionOutcome, Department
from uniadmit.services.scoring import Ranker


def department_filename(department: str) -> str:
    return department.lower() + ".txt"


def format_department_lines(outcome: AdmissionOutcome, department: str, ranker: Ranker) -> List[str]:
    """`Имя Фамилия 87.50`: лучший балл с двумя знаками, порядок как при зачислении."""
    calc = ranker.calculator
    admitted = ranker.rank(outcome.roster.get(department, ()), department)
    return [f"{a.full_name} {calc.effective_score(a, department):.2f}" for a in admitted]


def write_admissions(outcome: AdmissionOutcome, departments: Sequence[Department],
                     ranker: Ranker, output_dir: Path) -> List[Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    for dep in departments:
        lines = format_department_lines(outcome, dep.name, ranker)
        path = output_dir / department_filename(dep.name)
        with open(path, "w", encoding="utf-8") as f:
            f.writelines(line + "\n" for line in lines)
        written.append(path)
        logger.debug("   %s: %d строк → %s", dep.name, len(lines), path)
    logger.info("Списки зачисленных записаны в %s (%d файлов)", output_dir, len(written))
    return written
