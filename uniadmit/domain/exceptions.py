"""
Исключения распределения абитуриентов.

Иерархия: всё наследуется от AdmissionError, чтобы скрипт мог
поймать любую ошибку ввода одним except и не начинать распределение.
"""

from typing import Any, Dict, Optional


class AdmissionError(Exception):
    """Базовое исключение проекта."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class MalformedApplicantRecordError(AdmissionError):
    """Строка абитуриента не разбирается: не то число полей или не число."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        field: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        details: Dict[str, Any] = {}
        if line is not None:
            details["line"] = line
        if field:
            details["field"] = field
        super().__init__(message, details, original_error)


class MissingSubjectScoreError(AdmissionError):
    """У абитуриента нет балла по профильному предмету факультета."""

    def __init__(self, message: str, applicant: str, subject: str):
        super().__init__(message, {"applicant": applicant, "subject": subject})


class DuplicateApplicantError(AdmissionError):
    """Два абитуриента с одинаковым полным именем."""

    def __init__(self, message: str, full_name: str):
        super().__init__(message, {"full_name": full_name})


class QuotaInputError(AdmissionError):
    """Квоту не удалось прочитать."""
    pass


class UnknownDepartmentError(AdmissionError):
    """Запрошен факультет, которого нет в конфигурации."""

    def __init__(self, message: str, department: str):
        super().__init__(message, {"department": department})
