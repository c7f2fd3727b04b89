from .engine_base import PlayerImplementation
from tunebridge.utils.logging import get_logger

class LinuxPlayer(PlayerImplementation):
    name = "linux"
    platform_label = "Linux"

    def play_audio(self, file_path: str):
        get_logger().debug(f"[{self.name}] play_audio {file_path}")
        print(f"Playing audio on {self.platform_label}: {file_path}")

    def pause_audio(self):
        get_logger().debug(f"[{self.name}] pause_audio")
        print(f"Pausing audio on {self.platform_label}")
