"""
quickobj – быстрый загрузчик Wavefront OBJ/MTL в структуру,
готовую для рендера: пул вершин, индекс‑буфер треугольников,
объекты/группы и материалы.
"""

from quickobj.utils import logger, Config
from quickobj.errors import (
    ObjLoaderError,
    InvalidExtension,
    OpenFailure,
    MalformedFaceReference,
    MalformedNumericField,
    ParseWarning,
)
from quickobj.mesh import Vertex, Group, MeshObject, Mesh
from quickobj.assets.material import Material
from quickobj.parsing import ObjBuilder, parse_obj, parse_mtl, load_mtl
from quickobj.utils.loader import Loader, load_obj

__version__ = "1.0.0"

__all__ = [
    "Loader",
    "load_obj",
    "parse_obj",
    "parse_mtl",
    "load_mtl",
    "ObjBuilder",
    "Vertex",
    "Group",
    "MeshObject",
    "Mesh",
    "Material",
    "Config",
    "ObjLoaderError",
    "InvalidExtension",
    "OpenFailure",
    "MalformedFaceReference",
    "MalformedNumericField",
    "ParseWarning",
]
