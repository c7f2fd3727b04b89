from .music_player import MusicPlayer


class RefinedMusicPlayer(MusicPlayer):
    """MusicPlayer with shuffle, seek and playback-speed controls"""

    def shuffle(self):
        self._get_playlist().shuffle()
        print("Playlist shuffled.")

    def seek(self, seconds: int):
        # No playback position is tracked, so this only reports
        print(f"Seeking to {seconds} seconds.")

    def set_playback_speed(self, speed: float):
        print(f"Setting playback speed to {speed}x.")
