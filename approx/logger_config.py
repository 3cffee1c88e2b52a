import logging
from typing import Final

from colorlog import ColoredFormatter

# Корневой логгер пакета: модульные логгеры (approx.core.*) пропагируют в него
ROOT_LOGGER_NAME: Final[str] = "approx"

# Уровень, который включает configure_logging без аргументов
DEFAULT_LOG_LEVEL: Final[int] = logging.DEBUG

# Без configure_logging вывод настраивает приложение
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(level: int = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """
    Цветной console handler на корневом логгере пакета.

    Вызывается приложением явно; повторный вызов меняет только уровень.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    if not any(isinstance(h.formatter, ColoredFormatter) for h in root.handlers):
        formatter = ColoredFormatter(
            "%(log_color)s%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                'DEBUG':    'cyan',
                'INFO':     'green',
                'WARNING':  'yellow',
                'ERROR':    'red',
                'CRITICAL': 'bold_red',
            }
        )

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    return root
