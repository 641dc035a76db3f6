"""
Validation utilities
"""
import re
from decimal import Decimal, InvalidOperation


class InvalidInputError(ValueError):
    """Некорректные входные данные (отрицательная цена, ставка, пустая категория...)"""
    pass


def normalize_decimal_input(value: str) -> str:
    """
    Нормализовать ввод суммы: убрать пробелы, заменить запятую на точку

    Example:
        >>> normalize_decimal_input(" 100,50 ")
        "100.50"
    """
    return value.strip().replace(",", ".")


def to_decimal(value, field: str = "amount") -> Decimal:
    """
    Привести число к Decimal

    Args:
        value: int / float / Decimal / str
        field: Имя поля для сообщения об ошибке

    Returns:
        Конечное Decimal значение

    Raises:
        InvalidInputError: bool, None, нечисловая строка, NaN или Infinity
    """
    if isinstance(value, bool) or value is None:
        raise InvalidInputError(f"{field} must be a number, got {value!r}")

    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, int):
            result = Decimal(value)
        elif isinstance(value, float):
            # str() keeps 0.1 as 0.1 instead of its binary expansion
            result = Decimal(str(value))
        elif isinstance(value, str):
            normalized = normalize_decimal_input(value)
            if not re.fullmatch(r"-?\d+(\.\d+)?", normalized):
                raise InvalidInputError(f"{field} is not a valid number: {value!r}")
            result = Decimal(normalized)
        else:
            raise InvalidInputError(f"{field} must be a number, got {type(value).__name__}")
    except InvalidOperation as e:
        raise InvalidInputError(f"{field} is not a valid number: {value!r}") from e

    if not result.is_finite():
        raise InvalidInputError(f"{field} must be finite, got {value!r}")

    return result


def non_negative_decimal(value, field: str = "amount") -> Decimal:
    """Decimal >= 0, иначе InvalidInputError"""
    result = to_decimal(value, field)
    if result < 0:
        raise InvalidInputError(f"{field} cannot be negative: {result}")
    return result


def non_negative_int(value, field: str) -> int:
    """Целое >= 0 (годы, возраст)"""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{field} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidInputError(f"{field} cannot be negative: {value}")
    return value
