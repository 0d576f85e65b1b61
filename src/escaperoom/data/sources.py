from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Union

from ..errors import NotFoundError

logger = logging.getLogger(__name__)

RESOURCE_PACKAGE = "escaperoom.resources"


def read_text(source: Union[str, Path]) -> str:
    """Read a named source as UTF-8 text.

    An existing filesystem path wins. A bare name with no directory part
    (``"rooms.json"``) is then looked up among the resources bundled in
    ``escaperoom.resources``. Raises NotFoundError when neither exists or the
    file cannot be read.
    """
    path = Path(source)
    if path.is_file():
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise NotFoundError(str(source)) from e
        logger.debug("Read %d chars from %s", len(text), path)
        return text

    if path.name != str(source):
        raise NotFoundError(str(source))

    resource = resources.files(RESOURCE_PACKAGE).joinpath(path.name)
    if resource.is_file():
        text = resource.read_text(encoding="utf-8")
        logger.debug("Read %d chars from packaged resource %s", len(text), path.name)
        return text

    raise NotFoundError(str(source))
