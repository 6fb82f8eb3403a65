"""
Меш для рендера – создаёт буферы в GPU‑драйвере при первом draw().
"""

from obj2webgl.mesh.artifact import MeshArtifact
from obj2webgl.utils.logger import logger


class Mesh:
    """Обёртка над MeshArtifact с ленивой загрузкой буферов."""
    def __init__(self, artifact: MeshArtifact, name="Mesh"):
        self.artifact = artifact
        self.name = name
        self.vb = None
        self.ib = None
        self._backend = None
        self.index_count = len(artifact.index_buffer)

    def _setup_gpu_buffers(self, backend):
        self.vb = backend.create_buffer(self.artifact.vertex_buffer.tobytes(), usage="vertex")
        self.ib = backend.create_buffer(self.artifact.index_buffer.tobytes(), usage="index")
        self._backend = backend
        logger.debug(f"[Mesh] {self.name}: uploaded {self.artifact!r}")

    def draw(self, backend):
        """Отрисовать меш, создавая буферы «лениво»."""
        if self.vb is None:
            self._setup_gpu_buffers(backend)

        backend.set_vertex_buffers(self.vb, self.ib)
        backend.set_vertex_layout(self.artifact.vertex_stride_bytes, self.artifact.attributes())
        backend.draw_indexed(self.index_count, self.artifact.index_type)

    def cleanup(self):
        """Освободить GPU‑ресурсы."""
        if self._backend is None:
            return
        for buf in (self.vb, self.ib):
            if buf is not None:
                self._backend.release(buf)
        self.vb = self.ib = None
        self._backend = None
