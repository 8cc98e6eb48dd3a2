from __future__ import annotations


def parse_correct_indicator(cell: str) -> int:
    """
    Ячейка 'правильный ответ' -> номер ответа.
    '2', '2.0', ' 2 ' -> 2; пусто, текст, дробное -> 0.
    Диапазон 1..4 здесь не проверяется.
    """
    raw = (cell or "").strip().replace(",", ".")
    if not raw:
        return 0
    try:
        value = float(raw)
    except ValueError:
        return 0
    if not value.is_integer():
        return 0
    return int(value)


def format_number(value: float) -> str:
    """
    1.0 -> '1', 0.5 -> '0.5'.
    """
    if float(value).is_integer():
        return str(int(value))
    return str(float(value))
