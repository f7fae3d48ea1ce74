# tonewise/logging_config.py

import logging
import sys

from tonewise.config import LOG_LEVEL, LOG_FILE

MAX_INFO_MESSAGE_LENGTH = 1000


class TrimFilter(logging.Filter):
    """
    Фильтр для обрезки длинных сообщений.
    - записи ниже logger_level отбрасываются
    - INFO записи обрезаются до 1000 символов (промпты и ответы модели бывают длинными)
    - WARNING и выше пропускаются без изменений
    """

    def __init__(self, logger_level=logging.INFO):
        super().__init__()
        self.logger_level = logger_level

    def filter(self, record):
        if record.levelno < self.logger_level:
            return False

        if record.levelno == logging.INFO:
            if record.args:
                try:
                    formatted_msg = record.msg % record.args
                except (TypeError, ValueError):
                    formatted_msg = str(record.msg)
                if len(formatted_msg) > MAX_INFO_MESSAGE_LENGTH:
                    record.msg = formatted_msg[:MAX_INFO_MESSAGE_LENGTH] + "... [trimmed]"
                    record.args = ()
            elif isinstance(record.msg, str) and len(record.msg) > MAX_INFO_MESSAGE_LENGTH:
                record.msg = record.msg[:MAX_INFO_MESSAGE_LENGTH] + "... [trimmed]"

        return True


def setup_logging(level_name: str = LOG_LEVEL, log_file: str = LOG_FILE):
    """
    Настройка корневого логгера: консоль + (опционально) файл, обрезка длинных INFO сообщений.
    """
    level = getattr(logging, level_name.upper(), logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        '%(asctime)s,%(msecs)03d [%(levelname)s] %(filename)s:%(lineno)d %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    trim_filter = TrimFilter(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(trim_filter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(trim_filter)
        logger.addHandler(file_handler)

    # Снижаем уровень логирования для шумных библиотек
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('anthropic').setLevel(logging.WARNING)
    logging.getLogger('langchain').setLevel(logging.WARNING)

    logger.info("Logging configured: level=%s, file=%s", logging.getLevelName(level), log_file or "-")
