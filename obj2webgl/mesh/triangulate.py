# obj2webgl/mesh/triangulate.py
"""
Триангуляция веером: полигон (c0 … c(k‑1)) → (c0, ci, ci+1), i = 1 … k‑2.
Выпуклость и планарность не проверяются.
"""

from typing import TYPE_CHECKING, Iterator, Tuple

if TYPE_CHECKING:
    from obj2webgl.parser.obj_data import Face, FaceCorners


def fan_indices(count: int) -> Iterator[Tuple[int, int, int]]:
    """Номера углов каждого треугольника веера."""
    for i in range(1, count - 1):
        yield 0, i, i + 1


def triangulate_face(face: "Face", corners: "FaceCorners") -> int:
    """Дописать треугольники полигона в `corners`, вернуть их количество."""
    emitted = 0
    for tri in fan_indices(len(face)):
        for j in tri:
            corners.positions.append(face.positions[j])
            if face.texcoords:
                corners.texcoords.append(face.texcoords[j])
            if face.normals:
                corners.normals.append(face.normals[j])
            corners.lines.append(face.line)
        emitted += 1
    return emitted
