from .engine_base import PlayerImplementation
from .engine_windows import WindowsPlayer
from .engine_linux import LinuxPlayer
from .formats import check_format
from .music_player import MusicPlayer
from .refined_player import RefinedMusicPlayer
from .registry import (
    UnknownBackendError,
    available_backends,
    detect_platform_name,
    detect_player_implementation,
    get_player_implementation,
    register_backend,
)

__all__ = [
    'PlayerImplementation',
    'WindowsPlayer',
    'LinuxPlayer',
    'check_format',
    'MusicPlayer',
    'RefinedMusicPlayer',
    'UnknownBackendError',
    'available_backends',
    'detect_platform_name',
    'detect_player_implementation',
    'get_player_implementation',
    'register_backend',
]
