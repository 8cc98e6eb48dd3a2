import html

LINE_BREAK = "<br/>"


def decode_entities(s: str) -> str:
    """
    '&lt;b&gt;x &amp; y&lt;/b&gt;' -> '<b>x & y</b>'.
    Текст в таблице бывает уже экранирован инструментом выгрузки.
    """
    return html.unescape(s or "")


def join_cells(*parts: str) -> str:
    return LINE_BREAK.join(p or "" for p in parts)


def text_field_value(s: str) -> str:
    """
    Значение для текстового поля ответа: трим, затем раскодирование сущностей.
    """
    return decode_entities((s or "").strip())


def category_path(root: str, category: str) -> str:
    """
    ('top', ' Algebra ') -> 'top/algebra'
    """
    return f"{root}/{(category or '').strip().lower()}"


def quote(value: str) -> str:
    """
    Оборачивает поле в двойные кавычки и завершает запятой.
    Внутренние кавычки и запятые НЕ экранируются — так устроен формат.
    """
    return f'"{value}",'
