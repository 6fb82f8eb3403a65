# obj2webgl/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер + OpenGL‑сообщения для отладки.
# ---------------------------------------------------------------

import logging


def init_logger(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("obj2webgl")

logger = init_logger()


def set_level(level) -> None:
    """Поменять уровень логгера ("DEBUG", "INFO", ... или int)."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)


def gl_check_error(context: str = ""):
    """Проверить glGetError и вывести в лог, если что‑то не так."""
    # GL импортируется лениво: парсеру и эмиттеру контекст OpenGL не нужен
    from OpenGL import GL

    err = GL.glGetError()
    if err != GL.GL_NO_ERROR:
        from OpenGL import GLU
        msg = GLU.gluErrorString(err).decode()
        logger.error(f"OpenGL error {msg} [{context}]")
        return err
    return None
