"""
Работа с путями и чтение файлов целиком.

Пути в OBJ/MTL всегда склеиваются через `/`: обратные слеши
приводятся к прямым, каталог – всё до последнего `/` включительно.
"""

from pathlib import Path

from quickobj.errors import InvalidExtension, OpenFailure
from quickobj.utils.logger import logger


def normalize(path: str) -> str:
    return str(path).replace("\\", "/")


def directory_of(path: str) -> str:
    """`"a/b/c.obj"` → `"a/b/"`, `"c.obj"` → `""`."""
    path = normalize(path)
    cut = path.rfind("/")
    return path[:cut + 1] if cut >= 0 else ""


def stem_of(path: str) -> str:
    name = normalize(path)[len(directory_of(path)):]
    dot = name.rfind(".")
    return name[:dot] if dot > 0 else name


def check_extension(path: str, extensions) -> None:
    """Бросает `InvalidExtension`, если суффикс не из списка."""
    lowered = normalize(path).lower()
    if not any(lowered.endswith(ext.lower()) for ext in extensions):
        raise InvalidExtension(path, extensions)


def read_file(path: str) -> bytes:
    """Прочитать файл целиком; любые ошибки ОС → `OpenFailure`."""
    p = Path(path).expanduser()
    # is_file() тоже может бросить OSError (ENAMETOOLONG, EACCES)
    try:
        if not p.is_file():
            raise OpenFailure(path, "file not found")
        data = p.read_bytes()
    except OpenFailure:
        raise
    except OSError as exc:
        raise OpenFailure(path, str(exc)) from exc
    logger.debug(f"[Paths] Read {len(data)} bytes from {p}")
    return data
