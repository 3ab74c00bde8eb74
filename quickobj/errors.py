# quickobj/errors.py
"""
Исключения загрузчика и записи о «мягких» ошибках разбора.

* Ошибки уровня файла (расширение, открытие) прерывают загрузку.
* Ошибки в отдельной строке (числа, лишние поля) восстанавливаются
  на месте и попадают в список `ParseWarning`.
"""

from __future__ import annotations

from dataclasses import dataclass


class ObjLoaderError(Exception):
    """Базовый класс всех ошибок quickobj."""


class InvalidExtension(ObjLoaderError, ValueError):
    """Путь не оканчивается ожидаемым расширением (.obj / .mtl)."""

    def __init__(self, path: str, expected) -> None:
        self.path = path
        self.expected = tuple(expected)
        super().__init__(f"'{path}' has no recognised extension {self.expected}")


class OpenFailure(ObjLoaderError, OSError):
    """Файл не найден или не может быть прочитан."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        msg = f"Cannot open '{path}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class MalformedFaceReference(ObjLoaderError, ValueError):
    """Ссылка в строке `f` не разрешается в существующий элемент пула."""

    def __init__(self, line: int, token: str, reason: str = "") -> None:
        self.line = line
        self.token = token
        self.reason = reason
        msg = f"line {line}: bad face reference '{token}'"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class MalformedNumericField(ObjLoaderError, ValueError):
    """Поле не разбирается как число; вызывающий подставляет ноль."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"not a number: '{token}'")


@dataclass(frozen=True)
class ParseWarning:
    """Одна «мягкая» ошибка: где случилась и что именно."""
    source: str
    line: int
    kind: str
    message: str

    def __str__(self) -> str:
        return f"{self.source}:{self.line}: [{self.kind}] {self.message}"
