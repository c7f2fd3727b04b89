import os
from typing import Iterable, Optional

from tunebridge.config.settings import PlayerConfig

DEFAULT_SUPPORTED_FORMATS = tuple(PlayerConfig().supported_formats)


def check_format(file_path: str, supported: Optional[Iterable[str]] = None) -> bool:
    """Return True if the extension of file_path is in the supported set.

    Only reports; nothing is rejected on a False result.
    """
    if supported is None:
        supported = DEFAULT_SUPPORTED_FORMATS
    extension = os.path.splitext(file_path)[1].lstrip('.').lower()
    return extension in {ext.lower().lstrip('.') for ext in supported}
