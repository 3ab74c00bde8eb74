# -*- coding: utf-8 -*-
"""
Построчный токенизатор для OBJ и MTL.

Из сырого буфера лениво выдаются записи `Line`:
ключевое слово (первый токен) + «хвост» строки без ведущих
и завершающих пробелов/табов. Пустые строки и комментарии
(`#` первым непробельным символом) пропускаются.

Генератор можно перезапустить с любого байтового смещения –
смещение каждой строки лежит в `Line.offset`.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple

from quickobj.errors import MalformedNumericField

_BLANKS = " \t"


class Line(NamedTuple):
    number: int      # 1‑based номер строки в файле
    offset: int      # байтовое смещение начала строки
    keyword: str
    payload: str


def iter_lines(data: bytes, start: int = 0, encoding: str = "utf-8",
               first_line: int = 1) -> Iterator[Line]:
    """
    Разбить `data` на строки по `\\n` и классифицировать их.

    `start` – байтовое смещение, с которого продолжить разбор;
    `first_line` – номер строки, которая начинается в `start`.
    `\\r` перед `\\n` не отбрасывается.
    """
    size = len(data)
    pos = start
    number = first_line
    while pos < size:
        end = data.find(b"\n", pos)
        if end < 0:
            end = size
        raw = data[pos:end].decode(encoding, errors="replace")
        line = split_keyword(raw, number, pos)
        if line is not None:
            yield line
        pos = end + 1
        number += 1


def split_keyword(text: str, number: int = 0, offset: int = 0):
    """Вернуть `Line` или None для пустой строки / комментария."""
    body = text.lstrip(_BLANKS)
    if not body or body[0] == "#" or body.isspace():
        return None
    cut = 0
    while cut < len(body) and not body[cut].isspace():
        cut += 1
    payload = body[cut:].strip(_BLANKS)
    return Line(number, offset, body[:cut], payload)


def split_fields(payload: str) -> list[str]:
    """Серии пробелов/табов считаются одним разделителем."""
    return payload.split()


# ----------------------------------------------------------------------
# Числа
# ----------------------------------------------------------------------
def to_float(token: str) -> float:
    """Пустой токен → 0.0; мусор → `MalformedNumericField`."""
    if not token:
        return 0.0
    try:
        return float(token)
    except ValueError:
        raise MalformedNumericField(token) from None


def to_int(token: str) -> int:
    if not token:
        return 0
    try:
        return int(token)
    except ValueError:
        raise MalformedNumericField(token) from None


def resolve_index(token: str, size: int) -> int:
    """
    OBJ‑индекс → 0‑based позиция в пуле длиной `size`.

    Положительные индексы считаются с 1, отрицательные – с конца
    (`-1` – последний элемент). Ноль и выход за границы – `IndexError`,
    не‑число – `ValueError`.
    """
    value = int(token)
    if value > 0:
        idx = value - 1
    elif value < 0:
        idx = size + value
    else:
        raise IndexError("index 0 is not valid in OBJ")
    if not 0 <= idx < size:
        raise IndexError(f"index {value} out of range for pool of {size}")
    return idx
