from dataclasses import dataclass, field
from typing import List

from .playlist import Playlist


@dataclass
class User:
    """Listener owning an ordered list of playlists"""
    name: str
    email: str
    playlists: List[Playlist] = field(default_factory=list)

    def add_playlist(self, playlist: Playlist):
        self.playlists.append(playlist)

    def get_playlists(self) -> List[Playlist]:
        return self.playlists.copy()

    def get_name(self) -> str:
        return self.name

    def get_email(self) -> str:
        return self.email
