"""
Пакет mesh – триангуляция, унификация вершин и итоговый MeshArtifact.
"""

from obj2webgl.mesh.triangulate import fan_indices, triangulate_face
from obj2webgl.mesh.artifact import MeshArtifact, VertexAttribute
from obj2webgl.mesh.unifier import VertexUnifier, unify, MAX_UINT16_VERTICES
from obj2webgl.mesh.mesh import Mesh

__all__ = ["fan_indices", "triangulate_face", "MeshArtifact", "VertexAttribute",
           "VertexUnifier", "unify", "MAX_UINT16_VERTICES", "Mesh"]
