from dataclasses import dataclass, field
from typing import List

from .song import Song


@dataclass
class Playlist:
    """Named, ordered collection of songs. Order is playback order."""
    name: str
    songs: List[Song] = field(default_factory=list)

    def add_song(self, song: Song):
        self.songs.append(song)

    def remove_song(self, song: Song) -> bool:
        """Remove the first song equal to `song`; False if none matched"""
        for i, existing in enumerate(self.songs):
            if existing == song:
                self.songs.pop(i)
                return True
        return False

    def shuffle(self):
        # Placeholder: ordering is left untouched
        pass

    def get_songs(self) -> List[Song]:
        return self.songs.copy()

    def get_name(self) -> str:
        return self.name

    def __len__(self) -> int:
        return len(self.songs)
