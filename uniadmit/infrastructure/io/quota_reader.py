# uniadmit/infrastructure/io/quota_reader.py
from __future__ import annotations

import sys
from typing import Optional, TextIO

from uniadmit.config.logger import logger
from uniadmit.domain.exceptions import QuotaInputError


def read_quota(stream: Optional[TextIO] = None) -> int:
    """Первое целое из потока (по умолчанию stdin): квота на факультет."""
    stream = stream or sys.stdin
    tokens = stream.read().split()
    if not tokens:
        raise QuotaInputError("Квота не введена")
    try:
        quota = int(tokens[0])
    except ValueError as e:
        raise QuotaInputError(f"Квота должна быть целым числом, получено {tokens[0]!r}",
                              {"value": tokens[0]}, e) from e
    if quota < 0:
        logger.warning("Квота отрицательная (%d) — никто не будет зачислен", quota)
    return quota


def resolve_quota(configured: Optional[int], stream: Optional[TextIO] = None) -> int:
    if configured is not None:
        logger.info("Квота из настроек: %d", configured)
        if configured < 0:
            logger.warning("Квота отрицательная (%d) — никто не будет зачислен", configured)
        return configured
    return read_quota(stream)
