from typing import Iterable, Optional

from .engine_base import PlayerImplementation
from .formats import check_format
from tunebridge.core.library import Playlist, Song
from tunebridge.utils.logging import TuneBridgeLogger, get_logger


class MusicPlayer:
    """Playback abstraction over a swappable PlayerImplementation.

    The player owns the playlist position and the playing flag; everything
    that actually makes sound is delegated to the implementation, so swapping
    the implementation changes behaviour without touching this class.
    """

    def __init__(self, playlist: Playlist, implementation: PlayerImplementation,
                 logger: Optional[TuneBridgeLogger] = None,
                 supported_formats: Optional[Iterable[str]] = None):
        self._playlist = playlist
        self._implementation = implementation
        self._logger = logger if logger is not None else get_logger()
        self._supported_formats = supported_formats

        self._current_song: Optional[Song] = None
        self._current_index = 0
        self._is_playing = False
        self._is_repeat = False  # toggled by repeat(), not consulted by playback

    @property
    def current_song(self) -> Optional[Song]:
        return self._current_song

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def is_playing(self) -> bool:
        return self._is_playing

    @property
    def is_repeat(self) -> bool:
        return self._is_repeat

    @property
    def implementation(self) -> PlayerImplementation:
        return self._implementation

    @implementation.setter
    def implementation(self, implementation: PlayerImplementation):
        self._logger.info(f"Switching implementation {self._implementation.name} -> {implementation.name}")
        self._implementation = implementation

    def _get_playlist(self) -> Playlist:
        """Playlist accessor for subclasses"""
        return self._playlist

    def play(self):
        """Play the song at the current index. No-op on an empty playlist."""
        songs = self._playlist.get_songs()
        if not songs:
            self._logger.debug("play() ignored: playlist is empty")
            return
        # The playlist may have shrunk since the index was last moved
        self._current_index %= len(songs)
        self._current_song = songs[self._current_index]
        self._start(self._current_song)

    def play_song(self, song: Song):
        """Play an arbitrary song. The playlist index is left where it was."""
        self._current_song = song
        self._start(song)

    def pause(self):
        if not self._is_playing:
            return
        self._implementation.pause_audio()
        self._logger.log_playback('pause', self._implementation.name)
        self._is_playing = False

    def next(self):
        size = len(self._playlist)
        if size == 0:
            return
        self._current_index = (self._current_index + 1) % size
        self.play()

    def previous(self):
        size = len(self._playlist)
        if size == 0:
            return
        self._current_index = (self._current_index - 1 + size) % size
        self.play()

    def repeat(self):
        self._is_repeat = not self._is_repeat
        self._logger.debug(f"Repeat {'on' if self._is_repeat else 'off'}")

    def get_current_song(self) -> Optional[Song]:
        return self._current_song

    def _start(self, song: Song):
        # Unsupported formats are reported, never rejected
        if not check_format(song.file_path, self._supported_formats):
            self._logger.warning(f"Unsupported format '{song.extension}': {song}")
        self._implementation.play_audio(song.file_path)
        self._logger.log_playback('play', self._implementation.name, song.file_path)
        self._is_playing = True
