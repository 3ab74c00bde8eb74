"""
Пакет mesh – структуры данных результата разбора.
"""

from quickobj.mesh.mesh import Vertex, Group, MeshObject, Mesh

__all__ = ["Vertex", "Group", "MeshObject", "Mesh"]
