# quickobj/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер, общий для всех модулей пакета.
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("QuickObj")


logger = init_logger()


def set_log_level(level) -> None:
    """Сменить уровень логгера (имя уровня или число)."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            logger.error(f"[Logger] Unknown log level, keeping {logger.level}")
            return
    logger.setLevel(level)
