# obj2webgl/parser/obj_data.py
"""
Сырые данные, собранные парсером: таблицы атрибутов, углы треугольников
и метаданные (материалы, объекты, группы). Индексы везде 0‑based.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

# отсутствующий канал в ключе вершины
NO_INDEX = -1

VertexKey = Tuple[int, int, int]


@dataclass
class Face:
    """Один полигон в том виде, как он записан в строке `f`."""
    positions: List[int] = field(default_factory=list)
    texcoords: List[int] = field(default_factory=list)
    normals: List[int] = field(default_factory=list)
    line: int = 0

    def __len__(self) -> int:
        return len(self.positions)

    def add_corner(self, p: int, t: Optional[int] = None, n: Optional[int] = None) -> None:
        self.positions.append(p)
        if t is not None:
            self.texcoords.append(t)
        if n is not None:
            self.normals.append(n)


@dataclass
class FaceCorners:
    """
    Углы всех треугольников после триангуляции: параллельные списки.
    Список texcoords (normals) либо пуст, либо той же длины, что positions.
    """
    positions: List[int] = field(default_factory=list)
    texcoords: List[int] = field(default_factory=list)
    normals: List[int] = field(default_factory=list)
    lines: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.positions)

    @property
    def has_texcoord(self) -> bool:
        return bool(self.texcoords)

    @property
    def has_normal(self) -> bool:
        return bool(self.normals)

    @property
    def triangle_count(self) -> int:
        return len(self.positions) // 3

    def key(self, i: int) -> VertexKey:
        """Ключ унифицированной вершины (p, t, n) для угла i."""
        return (
            self.positions[i],
            self.texcoords[i] if self.texcoords else NO_INDEX,
            self.normals[i] if self.normals else NO_INDEX,
        )


@dataclass
class ObjMetadata:
    """Имена из `mtllib`, `usemtl`, `o`, `g` – в порядке появления."""
    material_libs: List[str] = field(default_factory=list)
    materials: List[str] = field(default_factory=list)
    objects: List[str] = field(default_factory=list)
    groups: List[str] = field(default_factory=list)


@dataclass
class ObjData:
    """Результат разбора одного OBJ‑потока."""
    positions: List[Tuple[float, float, float, float]] = field(default_factory=list)
    normals: List[Tuple[float, float, float]] = field(default_factory=list)
    texcoords: List[Tuple[float, float]] = field(default_factory=list)
    corners: FaceCorners = field(default_factory=FaceCorners)
    metadata: ObjMetadata = field(default_factory=ObjMetadata)
    smooth: bool = False
