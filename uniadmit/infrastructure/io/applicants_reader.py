# uniadmit/infrastructure/io/applicants_reader.py
from __future__ import annotations

import csv
from pathlib import Path
from typing import List, Sequence, TextIO, Union

import numpy as np
import pandas as pd

from uniadmit.config.logger import logger
from uniadmit.domain.exceptions import (
    AdmissionError,
    DuplicateApplicantError,
    MalformedApplicantRecordError,
)
from uniadmit.domain.models import Applicant, ExamScore

Source = Union[str, Path, TextIO]


def _columns(subjects: Sequence[str], stages: int) -> List[str]:
    return (
        ["first_name", "last_name"]
        + [f"score:{s}" for s in subjects]
        + ["entrance"]
        + [f"pref_{i}" for i in range(stages)]
    )


def _load_frame(source: Source, n_fields: int) -> pd.DataFrame:
    """
    Строки вида `Имя Фамилия s1 … sK вступительный p1 … pW`,
    разделитель: любые пробелы, пустые строки пропускаются.
    """
    if isinstance(source, (str, Path)) and not Path(source).exists():
        raise AdmissionError(f"Файл абитуриентов не найден: {source}", {"path": str(source)})
    try:
        df = pd.read_csv(
            source,
            sep=r"\s+",
            header=None,
            dtype=object,
            engine="python",
            quoting=csv.QUOTE_NONE,
            keep_default_na=False,
            na_values=[],
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame()
    except pd.errors.ParserError as e:
        raise MalformedApplicantRecordError(f"Не удалось разобрать файл абитуриентов: {e}",
                                            original_error=e) from e

    if df.shape[1] != n_fields:
        raise MalformedApplicantRecordError(
            f"Ожидалось {n_fields} полей в записи, найдено {df.shape[1]}", line=1,
        )
    return df.reset_index(drop=True)


def parse_applicants(source: Source, subjects: Sequence[str], stages: int) -> List[Applicant]:
    """
    Читает и валидирует список абитуриентов.
    Ошибка в любой записи останавливает чтение целиком: нули вместо
    отсутствующих баллов не подставляем.
    """
    columns = _columns(subjects, stages)
    df = _load_frame(source, len(columns))
    if df.empty:
        return []
    df.columns = columns

    # добитые до ширины таблицы короткие строки: None/NaN или пустая строка
    absent = (df.isna() | df.eq("")).to_numpy()
    if absent.any():
        row = int(absent.any(axis=1).argmax())
        missing = columns[int(absent[row].argmax())]
        raise MalformedApplicantRecordError(
            f"Запись {row + 1}: не хватает полей (первое отсутствующее — {missing})",
            line=row + 1, field=missing,
        )

    num_cols = [f"score:{s}" for s in subjects] + ["entrance"]
    numeric = df[num_cols].apply(pd.to_numeric, errors="coerce")
    bad = ~np.isfinite(numeric.to_numpy(dtype=float))
    if bad.any():
        row = int(bad.any(axis=1).argmax())
        field = num_cols[int(bad[row].argmax())]
        raise MalformedApplicantRecordError(
            f"Запись {row + 1}: поле {field} не число ({df.at[row, field]!r})",
            line=row + 1, field=field,
        )

    pref_cols = [f"pref_{i}" for i in range(stages)]
    applicants: List[Applicant] = []
    seen = set()
    for i in range(len(df)):
        full_name = f"{df.at[i, 'first_name']} {df.at[i, 'last_name']}"
        if full_name in seen:
            raise DuplicateApplicantError(f"Запись {i + 1}: повторяющееся имя {full_name}", full_name)
        seen.add(full_name)
        applicants.append(Applicant(
            full_name=full_name,
            entrance_score=float(numeric.at[i, "entrance"]),
            exam_scores=tuple(ExamScore(s, float(numeric.at[i, f"score:{s}"])) for s in subjects),
            preferences=tuple(str(df.at[i, c]) for c in pref_cols),
        ))
    return applicants


def read_applicants(path: Path, subjects: Sequence[str], stages: int) -> List[Applicant]:
    logger.info("Читаем абитуриентов из %s …", path)
    applicants = parse_applicants(path, subjects, stages)
    logger.info("   прочитано %d абитуриентов.", len(applicants))
    return applicants
