# -*- coding: utf-8 -*-
"""
Загрузка с диска: OBJ + MTL, ошибки уровня файла, экспорт в numpy.
"""

import numpy as np
import pytest

from quickobj import (
    Config,
    InvalidExtension,
    Loader,
    MalformedFaceReference,
    OpenFailure,
    load_obj,
)


class TestLoader:
    """Полный путь Loader.load_file → Mesh."""

    def test_scene_loads(self, loader, scene_path):
        assert loader.load_file(scene_path)
        mesh = loader.mesh
        assert loader.error is None
        assert mesh.name == "scene"
        assert len(mesh.vertices) == 7
        assert mesh.indices == [0, 1, 2, 0, 2, 3, 4, 5, 6]

    def test_scene_hierarchy(self, loader, scene_path):
        loader.load_file(scene_path)
        floor, roof = loader.mesh.objects
        assert floor.name == "Floor"
        assert [g.name for g in floor.groups] == ["tiles"]
        assert floor.groups[0].face_materials == [(0, "red")]
        assert roof.name == "Roof"
        assert roof.first_index == 6
        # группа "trailing" без граней отброшена
        assert [g.name for g in roof.groups] == [""]
        assert roof.groups[0].face_materials == [(6, "blue")]

    def test_scene_materials(self, loader, scene_path):
        loader.load_file(scene_path)
        mesh = loader.mesh
        assert [m.name for m in mesh.materials] == ["red", "blue"]
        red = mesh.find_material("red")
        assert red.ambient == (0.1, 0.0, 0.0)
        assert red.illumination == 2
        assert red.map_kd == "red.png"
        blue = mesh.find_material("blue")
        assert blue.dissolve == 0.5
        assert blue.map_d.endswith("/alpha.png")
        assert mesh.find_material("green") is None

    def test_scene_vertex_attributes(self, loader, scene_path):
        loader.load_file(scene_path)
        v = loader.mesh.vertices
        assert v[2].texcoord == (1.0, 1.0)
        assert v[2].normal == (0.0, 0.0, 1.0)
        assert v[4].normal == (0.0, 0.0, 0.0)

    def test_constructor_loads_immediately(self, scene_path):
        loader = Loader(scene_path, config=Config())
        assert loader.mesh is not None

    def test_loader_is_reusable(self, loader, scene_path, write_file):
        assert loader.load_file(scene_path)
        other = write_file("tri.obj", "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n")
        assert loader.load_file(other)
        assert loader.mesh.name == "tri"
        assert loader.mesh.materials == []
        assert len(loader.mesh.vertices) == 3


class TestFailures:

    def test_wrong_extension(self, loader, write_file):
        path = write_file("model.txt", "v 0 0 0\n")
        assert not loader.load_file(path)
        assert loader.mesh is None
        assert isinstance(loader.error, InvalidExtension)

    def test_missing_file(self, loader, tmp_path):
        assert not loader.load_file((tmp_path / "nope.obj").as_posix())
        assert isinstance(loader.error, OpenFailure)

    def test_uppercase_extension_accepted(self, loader, write_file):
        path = write_file("BOX.OBJ", "v 0 0 0\nf 1 1 1\n")
        assert loader.load_file(path)

    def test_failure_discards_previous_mesh(self, loader, scene_path, write_file):
        assert loader.load_file(scene_path)
        bad = write_file("bad.obj", "v 0 0 0\nf 1 2 3\n")
        assert not loader.load_file(bad)
        assert loader.mesh is None
        assert isinstance(loader.error, MalformedFaceReference)
        assert loader.error.line == 2

    def test_missing_material_library_is_warning(self, loader, write_file):
        path = write_file("solo.obj", "mtllib gone.mtl\nv 0 0 0\nf 1 1 1\n")
        assert loader.load_file(path)
        assert loader.mesh.materials == []
        assert [w.kind for w in loader.warnings] == ["OpenFailure"]

    def test_mtl_warnings_are_collected(self, loader, write_file):
        write_file("w.mtl", "newmtl m\nKa 1 2\n")
        path = write_file("w.obj", "mtllib w.mtl\nv 0 0 0\nf 1 1 1\n")
        assert loader.load_file(path)
        assert [w.kind for w in loader.warnings] == ["IgnoredDirective"]
        assert loader.warnings[0].source.endswith("w.mtl")

    def test_load_obj_raises(self, tmp_path):
        with pytest.raises(OpenFailure):
            load_obj((tmp_path / "missing.obj").as_posix())


# ----------------------------------------------------------------------
# numpy‑экспорт
# ----------------------------------------------------------------------
def test_to_arrays(scene_path):
    mesh = load_obj(scene_path, Config())
    positions, normals, texcoords, indices = mesh.to_arrays()
    assert positions.shape == (7, 3) and positions.dtype == np.float32
    assert normals.shape == (7, 3)
    assert texcoords.shape == (7, 2)
    assert indices.dtype == np.uint32
    assert indices.tolist() == mesh.indices
    assert np.allclose(positions[5], [1.0, 0.0, 1.0])


def test_interleaved_layout(scene_path):
    mesh = load_obj(scene_path, Config())
    data = mesh.interleaved()
    assert data.shape == (7, 8)
    assert np.allclose(data[2], [1, 1, 0, 0, 0, 1, 1, 1])


def test_empty_mesh_arrays():
    from quickobj import Mesh
    positions, _, _, indices = Mesh().to_arrays()
    assert positions.shape == (0, 3)
    assert indices.shape == (0,)


# ----------------------------------------------------------------------
# Ошибки ОС при проверке пути (ENAMETOOLONG и т.п.)
# ----------------------------------------------------------------------
def test_unstatable_obj_path_returns_false(loader, tmp_path):
    path = (tmp_path / ("a" * 300 + ".obj")).as_posix()
    assert loader.load_file(path) is False
    assert loader.mesh is None
    assert isinstance(loader.error, OpenFailure)


def test_unstatable_mtllib_is_warning(loader, write_file):
    path = write_file("long.obj", "mtllib " + "m" * 300 + ".mtl\nv 0 0 0\nf 1 1 1\n")
    assert loader.load_file(path) is True
    assert loader.mesh.materials == []
    assert [w.kind for w in loader.warnings] == ["OpenFailure"]


def test_missing_file_message_not_wrapped_twice(loader, tmp_path):
    loader.load_file((tmp_path / "nope.obj").as_posix())
    assert str(loader.error).count("Cannot open") == 1


def test_to_arrays_matches_vertices(scene_path):
    mesh = load_obj(scene_path, Config())
    positions, normals, texcoords, _ = mesh.to_arrays()
    assert positions.tolist() == [list(v.position) for v in mesh.vertices]
    assert normals.tolist() == [list(v.normal) for v in mesh.vertices]
    assert texcoords.tolist() == [list(v.texcoord) for v in mesh.vertices]
