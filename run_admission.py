#!/usr/bin/env python3
import sys

from uniadmit.application.use_cases.run_admission import RunAdmissionUseCase
from uniadmit.config.config import settings
from uniadmit.config.logger import logger
from uniadmit.domain.exceptions import AdmissionError


def main() -> None:
    logger.info("=== Распределение абитуриентов: старт ===")
    try:
        use_case = RunAdmissionUseCase(settings)
        use_case.execute()
        logger.info("✅ Распределение завершено.")
    except AdmissionError as e:
        logger.error("❌ %s (%s)", e.message, e.details)
        sys.exit(1)
    except Exception:
        logger.exception("❌ Непредвиденная ошибка распределения")
        sys.exit(1)
    finally:
        logger.info("=== Распределение абитуриентов: конец ===")


if __name__ == "__main__":
    main()
