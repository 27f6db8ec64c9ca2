"""Настройки по умолчанию; переопределяются переменными окружения."""
import logging
import os

logger = logging.getLogger(__name__)


def env_int(name: str, default: int) -> int:
    """Положительное целое из окружения; при мусоре в переменной — `default`."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("%s=%r не является целым, используется %d", name, raw, default)
        return default
    if value <= 0:
        logger.warning("%s=%d должно быть положительным, используется %d", name, value, default)
        return default
    return value


class Config:
    """Конфигурация pnmio."""
    # Комментарий, который пишется в заголовок, если вызывающий не передал свой
    DEFAULT_COMMENT = os.environ.get('PNMIO_DEFAULT_COMMENT', 'Generated by pnmio')
    DEFAULT_MAX_VAL = env_int('PNMIO_DEFAULT_MAX_VAL', 255)

    LOG_LEVEL = os.environ.get('PNMIO_LOG_LEVEL', 'WARNING').upper()
