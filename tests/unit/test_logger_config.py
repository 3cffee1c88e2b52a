"""
Тесты для logger_config

Проверяет:
1. Модульные логгеры — потомки корневого логгера пакета
2. Без configure_logging пакет не добавляет вывод и не фиксирует уровень
3. configure_logging добавляет один console handler с ColoredFormatter
4. Диагностические сообщения операций (DEBUG)
"""

import logging
from typing import Iterator

import pytest
from colorlog import ColoredFormatter

from approx import configure_logging, from_min_max, parse
from approx.logger_config import DEFAULT_LOG_LEVEL, ROOT_LOGGER_NAME


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """Корневой логгер пакета; handlers и уровень восстанавливаются после теста"""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _colored_handlers(logger: logging.Logger) -> list:
    return [h for h in logger.handlers if isinstance(h.formatter, ColoredFormatter)]


# =============================================================================
# ПОВЕДЕНИЕ БИБЛИОТЕКИ ПО УМОЛЧАНИЮ
# =============================================================================


class TestLibraryDefaults:
    """Импорт пакета не настраивает вывод"""

    def test_module_logger_is_child(self) -> None:
        """Логгер модуля — потомок корневого"""
        logger = logging.getLogger("approx.core.domain.approximate")
        assert logger.parent is logging.getLogger(ROOT_LOGGER_NAME)

    def test_only_null_handler(self) -> None:
        """На корневом логгере пакета только NullHandler"""
        root = logging.getLogger(ROOT_LOGGER_NAME)
        assert root.handlers
        assert all(isinstance(h, logging.NullHandler) for h in root.handlers)

    def test_level_not_pinned(self) -> None:
        """Уровень не задан: решает конфигурация приложения"""
        assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.NOTSET

    def test_debug_reaches_application_handler(self, caplog: pytest.LogCaptureFixture) -> None:
        """DEBUG на корневом логгере приложения включает записи пакета"""
        caplog.set_level(logging.DEBUG)
        with pytest.raises(ValueError):
            parse("4.2±--0.3")
        assert any(r.name.startswith(ROOT_LOGGER_NAME) for r in caplog.records)


# =============================================================================
# CONFIGURE_LOGGING
# =============================================================================


class TestConfigureLogging:
    """Тесты для configure_logging"""

    def test_returns_package_root(self, package_logger: logging.Logger) -> None:
        """Возвращается корневой логгер пакета"""
        assert configure_logging() is package_logger

    def test_default_level_debug(self, package_logger: logging.Logger) -> None:
        """Без аргументов включается DEBUG"""
        configure_logging()
        assert DEFAULT_LOG_LEVEL == logging.DEBUG
        assert package_logger.level == logging.DEBUG

    def test_single_colored_handler(self, package_logger: logging.Logger) -> None:
        """Handler добавляется один раз, повторный вызов меняет только уровень"""
        configure_logging()
        configure_logging(logging.WARNING)
        assert len(_colored_handlers(package_logger)) == 1
        assert package_logger.level == logging.WARNING


# =============================================================================
# ДИАГНОСТИКА
# =============================================================================


class TestDiagnostics:
    """Диагностические сообщения операций"""

    def test_parse_failure_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Ошибка разбора пишется на DEBUG"""
        caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER_NAME)
        with pytest.raises(ValueError):
            parse("4.2±--0.3")
        assert "malformed delta" in caplog.text

    def test_invalid_range_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Неверный интервал пишется на DEBUG"""
        caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER_NAME)
        with pytest.raises(ValueError):
            from_min_max(2, 1)
        assert "Invalid range" in caplog.text
