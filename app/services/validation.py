from typing import Any


def is_present(value: Any) -> bool:
    """Проверка наличия поля: None, "", 0 и False считаются отсутствующими"""
    return bool(value)


def parse_integer(value: Any) -> int | None:
    """
    Приводит значение к целому числу.
    Принимает int, целые float и числовые строки ("7", "7.0").
    Дробные значения, нечисловые строки, bool и None дают None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        raw = value.strip()
        if not raw or "_" in raw:
            return None
        try:
            return int(raw)
        except ValueError:
            pass
        try:
            number = float(raw)
        except ValueError:
            return None
        if number != number or number in (float("inf"), float("-inf")):
            return None
        return int(number) if number.is_integer() else None
    return None


def parse_id(raw: Any) -> int | None:
    """id из пути: 0 и всё, что не приводится к целому, считаются отсутствующим id"""
    user_id = parse_integer(raw)
    if not user_id:
        return None
    return user_id
