# -*- coding: utf-8 -*-
"""
Конечный автомат, собирающий `Mesh` из строк OBJ.

* `v` сразу добавляет вершину в общий пул; `vt`/`vn` копятся
  в побочных таблицах и попадают в вершину только через грань.
* Грань из N > 3 вершин режется «веером» вокруг первой вершины.
* Границы Object/Group известны лишь задним числом: текущие
  объект и группа – курсоры, пустые удаляются при переходе
  и в конце файла.
"""

from __future__ import annotations

from typing import Callable, Optional

from quickobj.assets.material import Material
from quickobj.errors import (
    MalformedFaceReference,
    MalformedNumericField,
    ObjLoaderError,
    ParseWarning,
)
from quickobj.mesh.mesh import Group, Mesh, MeshObject, Vertex
from quickobj.parsing.mtl_parser import load_mtl
from quickobj.parsing.tokenizer import iter_lines, resolve_index, split_fields, to_float
from quickobj.utils.config import Config
from quickobj.utils.logger import logger

# (path, config, warnings) → materials
MaterialReader = Callable[[str, Config, list], list[Material]]


class ObjBuilder:
    """
    Один экземпляр – одна сборка за раз. `parse()` сбрасывает
    всё внутреннее состояние, поэтому объект можно переиспользовать,
    но не из нескольких потоков одновременно.
    """

    def __init__(self, config: Optional[Config] = None,
                 material_reader: Optional[MaterialReader] = None):
        self.config = config or Config()
        self.material_reader = material_reader or load_mtl
        self._reset("", "", "")

    # -----------------------------------------------------------------
    # Состояние
    # -----------------------------------------------------------------
    def _reset(self, name: str, base_dir: str, source: str) -> None:
        self.base_dir = base_dir
        self.source = source or "<obj>"
        self.warnings: list[ParseWarning] = []
        self.mesh = Mesh(name=name)
        self.texcoords: list[tuple[float, float]] = []
        self.normals: list[tuple[float, float, float]] = []
        self._unknown: set[str] = set()
        self._line = 0

        # неявные корневые объект и группа существуют с первой строки
        self.current_object = MeshObject()
        self.current_group = Group()
        self.current_object.groups.append(self.current_group)
        self.mesh.objects.append(self.current_object)

    def _warn(self, kind: str, message: str) -> None:
        warning = ParseWarning(self.source, self._line, kind, message)
        self.warnings.append(warning)
        logger.warning(f"[OBJ] {warning}")

    def _float(self, token: str) -> float:
        try:
            return to_float(token)
        except MalformedNumericField as exc:
            self._warn("MalformedNumericField", str(exc))
            return 0.0

    def _floats(self, payload: str, count: int) -> tuple:
        fields = split_fields(payload)
        fields += [""] * (count - len(fields))
        return tuple(self._float(f) for f in fields[:count])

    def _name(self, payload: str) -> str:
        return payload.rstrip() or self.config["unnamed_group"]

    # -----------------------------------------------------------------
    # Главный цикл
    # -----------------------------------------------------------------
    def parse(self, data: bytes, base_dir: str = "", name: str = "",
              source: str = "") -> Mesh:
        """
        Разобрать OBJ‑буфер. `base_dir` – каталог OBJ‑файла
        (с завершающим `/` или пустой), от него ищутся `mtllib`.
        """
        self._reset(name, base_dir, source)
        handlers = {
            "v": self._on_position,
            "vt": self._on_texcoord,
            "vn": self._on_normal,
            "f": self._on_face,
            "o": self._on_object,
            "g": self._on_group,
            "usemtl": self._on_usemtl,
            "mtllib": self._on_mtllib,
        }

        for line in iter_lines(data, encoding=self.config["encoding"]):
            self._line = line.number
            handler = handlers.get(line.keyword)
            if handler is None:
                if line.keyword not in self._unknown:
                    self._unknown.add(line.keyword)
                    logger.debug(f"[OBJ] Skipping unsupported keyword '{line.keyword}'")
                continue
            handler(line.payload)

        self._finish_object()
        mesh = self.mesh
        logger.debug(
            f"[OBJ] Built '{mesh.name}': {len(mesh.vertices)} vertices, "
            f"{len(mesh.indices)} indices, {len(mesh.objects)} object(s)"
        )
        return mesh

    # -----------------------------------------------------------------
    # Атрибуты
    # -----------------------------------------------------------------
    def _on_position(self, payload: str) -> None:
        self.mesh.vertices.append(Vertex(position=self._floats(payload, 3)))

    def _on_texcoord(self, payload: str) -> None:
        self.texcoords.append(self._floats(payload, 2))

    def _on_normal(self, payload: str) -> None:
        self.normals.append(self._floats(payload, 3))

    # -----------------------------------------------------------------
    # Иерархия
    # -----------------------------------------------------------------
    def _finish_group(self) -> None:
        if self.current_group.index_count == 0:
            self.current_object.groups.pop()

    def _finish_object(self) -> None:
        self._finish_group()
        if self.current_object.index_count == 0:
            self.mesh.objects.pop()

    def _on_object(self, payload: str) -> None:
        name = self._name(payload)
        here = len(self.mesh.indices)
        if self.current_object.index_count == 0:
            self.current_object.name = name
            self.current_object.first_index = here
            self.current_group.first_index = here
            return

        self._finish_object()
        self.current_object = MeshObject(name=name, first_index=here)
        self.current_group = Group(first_index=here)
        self.current_object.groups.append(self.current_group)
        self.mesh.objects.append(self.current_object)

    def _on_group(self, payload: str) -> None:
        name = self._name(payload)
        if self.current_group.index_count == 0:
            self.current_group.name = name
            return

        self._finish_group()
        self.current_group = Group(name=name, first_index=len(self.mesh.indices))
        self.current_object.groups.append(self.current_group)

    # -----------------------------------------------------------------
    # Материалы
    # -----------------------------------------------------------------
    def _on_usemtl(self, payload: str) -> None:
        self.current_group.face_materials.append(
            (len(self.mesh.indices), payload.rstrip())
        )

    def _on_mtllib(self, payload: str) -> None:
        if not self.config["load_materials"]:
            return
        path = self.base_dir + payload.rstrip().replace("\\", "/")
        try:
            materials = self.material_reader(path, self.config, self.warnings)
        except ObjLoaderError as exc:
            self._warn(type(exc).__name__, f"material library skipped: {exc}")
            return
        self.mesh.materials.extend(materials)
        logger.info(f"[OBJ] Loaded {len(materials)} material(s) from {path}")

    # -----------------------------------------------------------------
    # Грани
    # -----------------------------------------------------------------
    def _resolve_ref(self, ref: str) -> tuple[int, int, int]:
        """`p/t/n` → (слот вершины, слот texcoord или -1, слот нормали или -1)."""
        parts = ref.split("/")
        if len(parts) > 3 or not parts[0]:
            raise MalformedFaceReference(self._line, ref, "expected p, p/t, p//n or p/t/n")
        parts += [""] * (3 - len(parts))

        try:
            slot = resolve_index(parts[0], len(self.mesh.vertices))
            tex = resolve_index(parts[1], len(self.texcoords)) if parts[1] else -1
            norm = resolve_index(parts[2], len(self.normals)) if parts[2] else -1
        except (IndexError, ValueError) as exc:
            raise MalformedFaceReference(self._line, ref, str(exc)) from exc
        return slot, tex, norm

    def _on_face(self, payload: str) -> None:
        try:
            refs = [self._resolve_ref(ref) for ref in split_fields(payload)]
        except MalformedFaceReference as exc:
            if self.config["strict_faces"]:
                raise
            self._warn("MalformedFaceReference", f"face skipped: {exc}")
            return

        # дописываем атрибуты в уже существующие вершины
        vertices = self.mesh.vertices
        for slot, tex, norm in refs:
            if tex >= 0:
                vertices[slot].texcoord = self.texcoords[tex]
            if norm >= 0:
                vertices[slot].normal = self.normals[norm]

        slots = [slot for slot, _, _ in refs]
        indices = self.mesh.indices
        before = len(indices)
        if len(slots) <= 3:
            indices.extend(slots)
        else:
            first = slots[0]
            for i in range(1, len(slots) - 1):
                indices.extend((first, slots[i], slots[i + 1]))

        added = len(indices) - before
        self.current_group.index_count += added
        self.current_object.index_count += added


def parse_obj(data: bytes, base_dir: str = "", name: str = "",
              config: Optional[Config] = None,
              material_reader: Optional[MaterialReader] = None) -> Mesh:
    """Разобрать OBJ из памяти без участия `Loader`."""
    return ObjBuilder(config, material_reader).parse(data, base_dir, name)
