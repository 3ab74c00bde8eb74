# -*- coding: utf-8 -*-
"""
Разбор MTL‑файла в список `Material`.

Особенность: из всех карт только `map_d` дополняется каталогом
самого MTL‑файла, остальные `map_*` сохраняются как есть.
"""

from __future__ import annotations

from typing import Optional

from quickobj.assets.material import Material
from quickobj.errors import MalformedNumericField, ParseWarning
from quickobj.parsing.tokenizer import iter_lines, split_fields, to_float, to_int
from quickobj.utils.config import Config
from quickobj.utils.logger import logger
from quickobj.utils.paths import check_extension, directory_of, read_file

# ключ MTL → атрибут Material
_COLORS = {"Ka": "ambient", "Kd": "diffuse", "Ks": "specular"}
_FLOATS = {"Ns": "specular_exponent", "Ni": "optical_density", "d": "dissolve"}
_MAPS = {
    "map_Ka": "map_ka",
    "map_Kd": "map_kd",
    "map_Ks": "map_ks",
    "map_Ns": "map_ns",
    "map_bump": "map_bump",
    "map_Bump": "map_bump",
    "bump": "map_bump",
}


class MtlParser:
    """Один проход по MTL‑буферу; предупреждения копятся в `warnings`."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self.warnings: list[ParseWarning] = []

    def _warn(self, path: str, line: int, kind: str, message: str) -> None:
        warning = ParseWarning(path, line, kind, message)
        self.warnings.append(warning)
        logger.warning(f"[MTL] {warning}")

    def _number(self, convert, token: str, path: str, line: int):
        try:
            return convert(token)
        except MalformedNumericField as exc:
            self._warn(path, line, "MalformedNumericField", str(exc))
            return convert("")

    # -----------------------------------------------------------------
    def parse(self, data: bytes, path: str = "") -> list[Material]:
        base_dir = directory_of(path)
        materials: list[Material] = []
        named_first = False

        for line in iter_lines(data, encoding=self.config["encoding"]):
            key, payload = line.keyword, line.payload
            # запись‑заготовка: её займёт первый newmtl
            if not materials:
                materials.append(Material())
            current = materials[-1]

            if key == "newmtl":
                name = payload.rstrip() or self.config["unnamed_material"]
                if named_first:
                    current = Material()
                    materials.append(current)
                named_first = True
                current.name = name
            elif key in _COLORS:
                fields = split_fields(payload)
                if len(fields) != 3:
                    self._warn(path, line.number, "IgnoredDirective",
                               f"{key} expects 3 values, got {len(fields)}")
                    continue
                color = tuple(self._number(to_float, f, path, line.number) for f in fields)
                setattr(current, _COLORS[key], color)
            elif key in _FLOATS:
                setattr(current, _FLOATS[key],
                        self._number(to_float, payload.strip(), path, line.number))
            elif key == "illum":
                current.illumination = self._number(to_int, payload.strip(), path, line.number)
            elif key == "map_d":
                current.map_d = base_dir + payload.rstrip()
            elif key in _MAPS:
                setattr(current, _MAPS[key], payload.rstrip())
            else:
                logger.debug(f"[MTL] {path}:{line.number}: skipping '{key}'")

        logger.debug(f"[MTL] Parsed {len(materials)} material(s) from {path or '<bytes>'}")
        return materials


def parse_mtl(data: bytes, path: str = "", config: Optional[Config] = None) -> list[Material]:
    """Разобрать MTL из памяти; `path` нужен только для `map_d`."""
    return MtlParser(config).parse(data, path)


def load_mtl(path: str, config: Optional[Config] = None,
             warnings: Optional[list] = None) -> list[Material]:
    """
    Прочитать и разобрать MTL‑файл.

    Бросает `InvalidExtension` и `OpenFailure`; «мягкие» ошибки
    добавляются в `warnings`, если список передан.
    """
    config = config or Config()
    check_extension(path, config["mtl_extensions"])
    data = read_file(path)
    parser = MtlParser(config)
    materials = parser.parse(data, path)
    if warnings is not None:
        warnings.extend(parser.warnings)
    return materials
