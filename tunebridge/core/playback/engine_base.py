class PlayerImplementation:
    """Platform playback capability that MusicPlayer delegates to."""

    name = "base"
    platform_label = "Unknown"

    def play_audio(self, file_path: str):
        """Start playing the audio file at file_path."""
        raise NotImplementedError

    def pause_audio(self):
        """Pause whatever is currently playing."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
