"""
Arithmetic Settings — глобальная конфигурация точности деления

Деление может порождать бесконечные десятичные дроби, поэтому количество
дробных разрядов результата ограничено division accuracy.

Настройка process-wide:
- хранится в модуле как единственный неизменяемый ArithmeticSettings
- замена значения видна всем последующим делениям во всех потоках
- синхронизации НЕТ: параллельная смена точности во время делений
  не даёт никаких гарантий изоляции

Для изоляции используйте явный параметр: DecimalNumber.divide(other, accuracy=N).
"""

import logging
from contextlib import contextmanager
from typing import Final, Iterator

from pydantic import BaseModel, Field

from uncontrolled.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Максимальное количество дробных разрядов, которое производит деление
DIVISION_ACCURACY_DEFAULT: Final[int] = 30

# Минимально допустимая точность (1 → деление возвращает только целую часть)
DIVISION_ACCURACY_MIN: Final[int] = 1


# =============================================================================
# SETTINGS MODEL
# =============================================================================


class ArithmeticSettings(BaseModel):
    """
    Настройки арифметики.

    Immutable модель (frozen=True): смена настроек создаёт новый экземпляр.
    """

    division_accuracy: int = Field(
        DIVISION_ACCURACY_DEFAULT,
        ge=DIVISION_ACCURACY_MIN,
        description="Количество дробных разрядов, до которого ведётся деление",
    )

    model_config = {"frozen": True}


_settings: ArithmeticSettings = ArithmeticSettings()


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_division_accuracy(value: int) -> int:
    """
    Проверка значения division accuracy.

    Args:
        value: Предлагаемая точность

    Returns:
        value без изменений

    Raises:
        InvalidArgumentError: Если value не int или меньше DIVISION_ACCURACY_MIN
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"division accuracy must be an int, got {type(value).__name__}"
        )

    if value < DIVISION_ACCURACY_MIN:
        raise InvalidArgumentError(
            f"division accuracy must be >= {DIVISION_ACCURACY_MIN}, got {value}"
        )

    return value


# =============================================================================
# ДОСТУП К НАСТРОЙКАМ
# =============================================================================


def get_settings() -> ArithmeticSettings:
    """Текущие process-wide настройки."""
    return _settings


def get_division_accuracy() -> int:
    """Текущая process-wide точность деления."""
    return _settings.division_accuracy


def set_division_accuracy(value: int) -> int:
    """
    Установка process-wide точности деления.

    Args:
        value: Новая точность (>= DIVISION_ACCURACY_MIN)

    Returns:
        Предыдущее значение (для ручного восстановления)

    Raises:
        InvalidArgumentError: Если значение невалидно
    """
    global _settings

    validate_division_accuracy(value)
    previous = _settings.division_accuracy
    _settings = ArithmeticSettings(division_accuracy=value)

    logger.debug("division accuracy changed: %d -> %d", previous, value)
    return previous


def reset_settings() -> None:
    """Возврат настроек к значениям по умолчанию."""
    global _settings
    _settings = ArithmeticSettings()


@contextmanager
def division_accuracy(value: int) -> Iterator[int]:
    """
    Временная смена process-wide точности деления.

    Предыдущее значение восстанавливается при выходе из блока, в том числе
    при исключении. Изменение видно всем потокам на время блока.

    Examples:
        >>> with division_accuracy(5):
        ...     str(DecimalNumber.from_int(1) / DecimalNumber.from_int(3))
        '0.3333'
    """
    previous = set_division_accuracy(value)
    try:
        yield value
    finally:
        set_division_accuracy(previous)
