# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: запись OBJ/MTL в tmp_path и
загрузчик с конфигом по‑умолчанию.
"""

import textwrap
from pathlib import Path

import pytest

from quickobj import Config, Loader


def dedent_bytes(text: str) -> bytes:
    """Убрать отступ тройных кавычек и вернуть utf‑8 байты."""
    return textwrap.dedent(text).lstrip("\n").encode("utf-8")


# ----------------------------------------------------------------------
# Пример: квадрат + треугольник, две группы, два материала
# ----------------------------------------------------------------------
SCENE_OBJ = """
    # two objects
    mtllib scene.mtl
    o Floor
    v 0 0 0
    v 1 0 0
    v 1 1 0
    v 0 1 0
    vt 0 0
    vt 1 0
    vt 1 1
    vt 0 1
    vn 0 0 1
    g tiles
    usemtl red
    f 1/1/1 2/2/1 3/3/1 4/4/1
    o Roof
    v 0 0 1
    v 1 0 1
    v 0 1 1
    usemtl blue
    f -3 -2 -1
    g trailing
"""

SCENE_MTL = """
    newmtl red
    Ka 0.1 0.0 0.0
    Kd 1.0 0.0 0.0
    Ns 10
    illum 2
    map_Kd red.png

    newmtl blue
    Kd 0.0 0.0 1.0
    d 0.5
    map_d alpha.png
"""


@pytest.fixture
def write_file(tmp_path: Path):
    """Записать файл относительно tmp_path и вернуть его путь строкой."""
    def _write(rel: str, text: str) -> str:
        p = tmp_path / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(dedent_bytes(text))
        return p.as_posix()
    return _write


@pytest.fixture
def scene_path(write_file) -> str:
    write_file("scene.mtl", SCENE_MTL)
    return write_file("scene.obj", SCENE_OBJ)


@pytest.fixture
def loader() -> Loader:
    """Чистый Loader без чтения файла конфигурации."""
    return Loader(config=Config())
