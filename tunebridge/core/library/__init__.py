from .song import Song
from .playlist import Playlist
from .user import User

__all__ = ['Song', 'Playlist', 'User']
