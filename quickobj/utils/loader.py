# -*- coding: utf-8 -*-
"""
Загрузчик Wavefront OBJ (+ MTL) в `Mesh`.

`Loader` повторяет привычную схему «load_file → bool»: при неудаче
`mesh` остаётся None, причина – в `error`, частичный результат
не отдаётся. Для кода, которому удобнее исключения, есть `load_obj`.
"""

from __future__ import annotations

from typing import Optional

from quickobj.errors import ObjLoaderError, ParseWarning
from quickobj.mesh.mesh import Mesh
from quickobj.parsing.obj_builder import MaterialReader, ObjBuilder
from quickobj.utils.config import Config
from quickobj.utils.logger import logger, set_log_level
from quickobj.utils.paths import check_extension, directory_of, read_file, stem_of


class Loader:
    """Переиспользуемый загрузчик; один вызов `load_file` за раз."""

    def __init__(self, path: Optional[str] = None, config: Optional[Config] = None,
                 material_reader: Optional[MaterialReader] = None):
        self.config = config or Config()
        set_log_level(self.config["log_level"])
        self._builder = ObjBuilder(self.config, material_reader)
        self.mesh: Optional[Mesh] = None
        self.error: Optional[ObjLoaderError] = None
        self.warnings: list[ParseWarning] = []
        if path is not None:
            self.load_file(path)

    # -----------------------------------------------------------------
    def load_file(self, path: str) -> bool:
        """
        Прочитать и разобрать OBJ‑файл.

        True – `self.mesh` готов; False – файл не подошёл по расширению,
        не открылся или содержит неразрешимую ссылку в грани.
        """
        self.mesh = None
        self.error = None
        self.warnings = []
        self._builder.warnings.clear()
        try:
            self.mesh = self._load(path)
        except ObjLoaderError as exc:
            self.error = exc
            logger.error(f"[Loader] Failed to load '{path}': {exc}")
            return False
        finally:
            self.warnings = list(self._builder.warnings)
        return True

    def _load(self, path: str) -> Mesh:
        check_extension(path, self.config["obj_extensions"])
        data = read_file(path)
        mesh = self._builder.parse(data, directory_of(path), stem_of(path), source=path)
        logger.info(
            f"[Loader] Loaded '{path}': {len(mesh.vertices)} vertices, "
            f"{len(mesh.indices) // 3} triangles, {len(mesh.materials)} material(s)"
        )
        if self._builder.warnings:
            logger.warning(f"[Loader] {len(self._builder.warnings)} warning(s) in '{path}'")
        return mesh


def load_obj(path: str, config: Optional[Config] = None) -> Mesh:
    """Загрузить OBJ или бросить `ObjLoaderError`."""
    loader = Loader(config=config)
    if not loader.load_file(path):
        raise loader.error
    return loader.mesh
