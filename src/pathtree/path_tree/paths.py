"""Path normalization for PathTree addresses."""

import logging
from typing import List, Union

from pathtree.failure import Failure

logger = logging.getLogger(__name__)

ROOT_NAME = "."
SEPARATOR = "/"


def _canonicalize(path: str) -> str:
    segments = [segment for segment in path.strip().split(SEPARATOR) if segment.strip()]
    path = SEPARATOR.join(segments).strip()

    if not path:
        return ROOT_NAME
    if path != ROOT_NAME and not path.startswith(ROOT_NAME + SEPARATOR):
        path = ROOT_NAME + SEPARATOR + path
    return path


def normalize_path(raw: object) -> Union[str, Failure]:
    """Turn a raw path string into its canonical ``.`` or ``./a/b`` form.

    Surrounding whitespace is trimmed, runs of ``/`` collapse into one, leading
    and trailing ``/`` are dropped and a ``./`` prefix is added when missing.
    Whitespace-only segments are dropped as well, so no empty name can reach
    the tree. Normalizing an already normalized path returns it unchanged.

    Args:
        raw: The path to normalize.

    Returns:
        The canonical path, or a Failure when ``raw`` is not a string.

    Example:
        >>> normalize_path("a//b/")
        './a/b'
        >>> normalize_path("/")
        '.'
        >>> normalize_path("./a/b")
        './a/b'
        >>> normalize_path(42)
        Failure(operation='normalize_path', reason='path should be a string')
    """
    if not isinstance(raw, str):
        logger.debug("normalize_path: rejected %r", raw)
        return Failure("normalize_path", "path should be a string")
    return _canonicalize(raw)


def split_path(path: str) -> List[str]:
    """Normalize ``path`` and split it into segments; segment 0 is always the root.

    Example:
        >>> split_path("a/b/")
        ['.', 'a', 'b']
        >>> split_path(".")
        ['.']
    """
    return _canonicalize(path).split(SEPARATOR)
