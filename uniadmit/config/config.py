# uniadmit/config/config.py
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from uniadmit.domain.models import Department

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_DEFAULT_DATA_DIR = _PROJECT_ROOT / "data"

DEFAULT_SUBJECTS = ["Physics", "Chemistry", "Math", "ComputerScience"]

# профильные предметы факультета → по ним считается средний балл
DEFAULT_DEPARTMENT_SUBJECTS = {
    "Biotech": ["Chemistry", "Physics"],
    "Chemistry": ["Chemistry"],
    "Engineering": ["ComputerScience", "Math"],
    "Mathematics": ["Math"],
    "Physics": ["Physics", "Math"],
}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        populate_by_name=True,
        extra="ignore",
    )

    # окружение
    env: str = Field("dev", alias="ENV")
    data_dir: Path = Field(_DEFAULT_DATA_DIR, alias="DATA_DIR")

    # входные / выходные файлы
    applicants_filename: str = Field("applicants.txt", alias="APPLICANTS_FILE")
    output_dir: Path | None = Field(None, alias="OUTPUT_DIR")

    # квота; если не задана, читаем из stdin
    quota: int | None = Field(None, alias="QUOTA")

    # ───────────────── Волны зачисления ───────────────────────────────
    # Сколько приоритетов указывает каждый абитуриент (= число волн).
    admission_stages: int = Field(3, alias="ADMISSION_STAGES", ge=1)
    # Порядок предметов в строке абитуриента.
    subjects: list[str] = Field(default_factory=lambda: list(DEFAULT_SUBJECTS), alias="SUBJECTS")
    # Факультет → профильные предметы. Порядок ключей = порядок факультетов.
    department_subjects: dict[str, list[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_DEPARTMENT_SUBJECTS.items()},
        alias="DEPARTMENT_SUBJECTS",
    )

    report_to_console: bool = Field(True, alias="REPORT_TO_CONSOLE")

    @model_validator(mode="before")
    def _preprocess(cls, values: dict[str, Any]) -> dict[str, Any]:
        for key in ("data_dir", "DATA_DIR"):
            if key in values:
                values[key] = Path(values[key]).expanduser().resolve()
        return values

    @model_validator(mode="after")
    def _check_departments(self) -> "Settings":
        if not self.department_subjects:
            raise ValueError("department_subjects не может быть пустым")
        known = set(self.subjects)
        for dep, subjects in self.department_subjects.items():
            if not subjects:
                raise ValueError(f"У факультета {dep} нет профильных предметов")
            unknown = [s for s in subjects if s not in known]
            if unknown:
                raise ValueError(f"Факультет {dep}: неизвестные предметы {unknown}")
        return self

    @property
    def applicants_path(self) -> Path:
        path = Path(self.applicants_filename).expanduser()
        return path if path.is_absolute() else self.data_dir / path

    @property
    def results_dir(self) -> Path:
        return (self.output_dir or self.data_dir).expanduser()

    @property
    def subject_map(self) -> Mapping[str, tuple[str, ...]]:
        """Неизменяемая таблица «факультет → профильные предметы»."""
        return MappingProxyType({dep: tuple(subj) for dep, subj in self.department_subjects.items()})

    def departments(self, quota: int) -> tuple[Department, ...]:
        """Факультеты в заданном порядке, у всех одна и та же квота."""
        return tuple(
            Department(name=dep, quota=quota) for dep in self.department_subjects
        )


settings = Settings()
