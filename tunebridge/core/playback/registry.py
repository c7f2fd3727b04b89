"""
Backend registry: resolves PlayerImplementation variants by name or by host platform
"""

import platform
from typing import Dict, List, Type

from .engine_base import PlayerImplementation
from .engine_linux import LinuxPlayer
from .engine_windows import WindowsPlayer
from tunebridge.utils.logging import get_logger


class UnknownBackendError(ValueError):
    """Raised when no backend is registered under the requested name"""


_BACKENDS: Dict[str, Type[PlayerImplementation]] = {
    WindowsPlayer.name: WindowsPlayer,
    LinuxPlayer.name: LinuxPlayer,
}

# platform.system() value -> backend name
_PLATFORM_BACKENDS = {
    "Windows": WindowsPlayer.name,
    "Linux": LinuxPlayer.name,
}


def register_backend(backend_cls: Type[PlayerImplementation]):
    """Make a new backend variant available by its `name`"""
    _BACKENDS[backend_cls.name.lower()] = backend_cls
    return backend_cls


def available_backends() -> List[str]:
    return sorted(_BACKENDS)


def get_player_implementation(name: str) -> PlayerImplementation:
    """Instantiate the backend registered under name (case-insensitive)"""
    try:
        backend_cls = _BACKENDS[name.lower()]
    except KeyError:
        raise UnknownBackendError(
            f"Unknown backend '{name}', expected one of: {', '.join(available_backends())}"
        ) from None
    return backend_cls()


def detect_platform_name() -> str:
    return platform.system()


def detect_player_implementation(default_backend: str = LinuxPlayer.name) -> PlayerImplementation:
    """Pick the backend for the host platform, falling back to default_backend"""
    system = detect_platform_name()
    name = _PLATFORM_BACKENDS.get(system)
    if name is None:
        get_logger().warning(f"No backend for platform '{system}', using '{default_backend}'")
        name = default_backend
    return get_player_implementation(name)
