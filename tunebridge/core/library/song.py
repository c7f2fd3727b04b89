from dataclasses import dataclass
import os


@dataclass(frozen=True)
class Song:
    """A playable track: a title and the path of its audio file"""
    title: str
    file_path: str

    @property
    def extension(self) -> str:
        """Lower-cased file suffix without the dot, '' if there is none"""
        return os.path.splitext(self.file_path)[1].lstrip('.').lower()

    def get_title(self) -> str:
        return self.title

    def get_file_path(self) -> str:
        return self.file_path

    def __str__(self) -> str:
        return f"{self.title} ({self.file_path})"
