# quickobj/mesh/mesh.py
"""
Результат разбора OBJ: общий пул вершин, плоский индекс‑буфер
треугольников и иерархия Object → Group с журналом `usemtl`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

import numpy as np

from quickobj.assets.material import Material

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


@dataclass
class Vertex:
    """
    Вершина создаётся строкой `v`, а texcoord/normal дописываются
    в неё же при разборе граней (последняя ссылка побеждает).
    """
    position: Vec3 = (0.0, 0.0, 0.0)
    texcoord: Vec2 = (0.0, 0.0)
    normal: Vec3 = (0.0, 0.0, 0.0)


@dataclass
class Group:
    name: str = ""
    first_index: int = 0
    index_count: int = 0
    # (смещение в индекс‑буфере, имя материала) – по записи на каждый usemtl
    face_materials: list[tuple[int, str]] = field(default_factory=list)

    @property
    def last_index(self) -> int:
        return self.first_index + self.index_count

    def material_ranges(self) -> Iterator[tuple[int, int, str]]:
        """
        Поддиапазоны группы по материалам: (start, end, name).

        Переключения до начала группы сжимаются к `first_index`,
        пустые диапазоны пропускаются. Индексы до первого usemtl
        материала не имеют и не выдаются.
        """
        switches = self.face_materials
        for i, (offset, name) in enumerate(switches):
            start = min(max(offset, self.first_index), self.last_index)
            if i + 1 < len(switches):
                end = min(max(switches[i + 1][0], start), self.last_index)
            else:
                end = self.last_index
            if end > start:
                yield start, end, name


@dataclass
class MeshObject:
    """Объект `o` – диапазон индекс‑буфера и его группы."""
    name: str = ""
    first_index: int = 0
    index_count: int = 0
    groups: list[Group] = field(default_factory=list)

    @property
    def last_index(self) -> int:
        return self.first_index + self.index_count


@dataclass
class Mesh:
    name: str = ""
    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    objects: list[MeshObject] = field(default_factory=list)
    materials: list[Material] = field(default_factory=list)

    # -----------------------------------------------------------------
    def find_material(self, name: str) -> Optional[Material]:
        """Первый материал с данным именем или None (ссылки не проверяются)."""
        for mat in self.materials:
            if mat.name == name:
                return mat
        return None

    # -----------------------------------------------------------------
    def to_arrays(self) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """
        Массивы для GPU‑загрузки:
        positions (N,3), normals (N,3), texcoords (N,2) – float32,
        indices (M,) – uint32.
        """
        verts = self.vertices
        positions = np.array([v.position for v in verts], dtype=np.float32).reshape(-1, 3)
        normals = np.array([v.normal for v in verts], dtype=np.float32).reshape(-1, 3)
        texcoords = np.array([v.texcoord for v in verts], dtype=np.float32).reshape(-1, 2)
        indices = np.asarray(self.indices, dtype=np.uint32)
        return positions, normals, texcoords, indices

    def interleaved(self) -> np.ndarray:
        """(N,8) float32: позиция, нормаль, texcoord – как в vertex‑буфере."""
        positions, normals, texcoords, _ = self.to_arrays()
        return np.column_stack([positions, normals, texcoords]).astype(np.float32)
