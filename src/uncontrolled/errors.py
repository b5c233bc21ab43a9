"""
Errors — иерархия исключений uncontrolled-number

Все исключения библиотеки наследуются от UncontrolledNumberError, а конкретные
классы дополнительно наследуют стандартные ValueError / ArithmeticError, чтобы
вызывающий код мог ловить их привычным способом.

Деление и остаток по нулю НЕ являются ошибками (см. arithmetic.divide и
DecimalNumber.__mod__).
"""


class UncontrolledNumberError(Exception):
    """Базовое исключение библиотеки."""
    pass


class InvalidArgumentError(UncontrolledNumberError, ValueError):
    """
    Невалидный аргумент конструктора или настройки.

    Примеры:
    - отрицательное количество ведущих нулей дробной части
    - NaN при конструировании из float
    - division accuracy < 1
    - строка, не являющаяся каноническим представлением числа
    """
    pass


class UndefinedOperationError(UncontrolledNumberError, ArithmeticError):
    """
    Операция не имеет определённого результата.

    Единственный случай: сумма бесконечностей противоположных знаков
    (inf + (-inf)), для которой в модели нет представления NaN.
    """
    pass
