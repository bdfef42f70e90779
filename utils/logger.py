import logging
import logging.config

def setup_logging(app_config) -> logging.Logger:
    """Настройка логирования: консоль + RotatingFileHandler (если LOG_TO_FILE=true)"""
    app_config.ensure_directories()
    logging.config.dictConfig(app_config.get_logging_config())
    logger = logging.getLogger()
    logger.debug(f"🪵 Логирование настроено: {app_config.log_level.value}")
    return logger
