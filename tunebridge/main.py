#!/usr/bin/env python3
"""
TuneBridge Demo
Shows MusicPlayer delegating playback to swappable platform implementations.
Run with `python -m tunebridge`.
"""
import argparse
import json
import sys
import time
from typing import List, Optional

from tunebridge.config.settings import load_config
from tunebridge.core.library import Playlist, Song, User
from tunebridge.core.playback import (
    MusicPlayer,
    UnknownBackendError,
    available_backends,
    detect_platform_name,
    detect_player_implementation,
    get_player_implementation,
)
from tunebridge.utils.logging import init_logger


def banner(title: str):
    print("=======================================")
    print(title)
    print("=======================================\n")


def print_user_playlists(user: User):
    print(f"User {user.get_name()} owns playlists:")
    for playlist in user.get_playlists():
        print(f" - {playlist.get_name()}")
        for song in playlist.get_songs():
            print(f"    * {song.get_title()} ({song.get_file_path()})")


def resolve_backend(name: str, default_backend: str = "linux"):
    """Backend by name; "auto" picks the one for the host platform"""
    if name.lower() == "auto":
        return detect_player_implementation(default_backend)
    return get_player_implementation(name)


def run_demo(first_backend: str = "windows", supported_formats=None, logger=None,
             default_backend: str = "linux"):
    """Print the scripted Bridge trace"""
    print(f"[Detected OS: {detect_platform_name()}]\n")

    banner("===   Music Player Demo (Bridge)    ===")

    mp3 = Song("Song One (MP3)", "song1.mp3")
    wav = Song("Song Two (WAV)", "song2.wav")

    playlist = Playlist("Bridge Playlist")
    playlist.add_song(mp3)
    playlist.add_song(wav)

    user = User("Alice", "alice@example.com")
    user.add_playlist(playlist)

    # Normal playback
    player = MusicPlayer(playlist, resolve_backend(first_backend, default_backend),
                         logger=logger, supported_formats=supported_formats)

    print(">>> Normal Operations (portable across OS) <<<\n")
    player.play()
    player.pause()
    player.play_song(wav)
    player.play()

    # Same playlist, different implementation
    print("\n>>> Switching Implementation to Linux <<<")
    linux_player = MusicPlayer(playlist, get_player_implementation("linux"),
                               logger=logger, supported_formats=supported_formats)
    linux_player.play()
    linux_player.pause()

    print()
    banner("===   Remaining Issue: Unsupported   ===")

    # Played anyway; only a warning is logged
    print(">>> Case: Unsupported format (.aac /.flac) <<<")
    aac = Song("AAC Track", "song4.aac")
    flac = Song("FLAC Track", "song5.flac")
    playlist.add_song(aac)
    playlist.add_song(flac)
    player.play_song(aac)
    player.play_song(flac)

    print()
    banner("===        User Playlists           ===")
    print_user_playlists(user)

    print("\n=== End of Bridge Demo ===")
    return user


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Run the TuneBridge demo')
    parser.add_argument('--config', help='Path to a JSON config file')
    parser.add_argument('--backend', help=f"Backend for the first player (auto, {', '.join(available_backends())})")
    parser.add_argument('--log-dir', help='Directory for log files')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError, TypeError) as e:
        print(f"[TuneBridge] Could not load config: {e}", file=sys.stderr)
        return 1

    logger = init_logger(
        log_dir=args.log_dir or config.log_dir,
        log_level=config.level(config.log_level),
        console_level=config.level(config.console_log_level),
        enable_playback_logging=config.enable_playback_logging,
    )
    if config.ignored_keys:
        logger.warning(f"Ignoring unknown config keys: {', '.join(config.ignored_keys)}")
    logger.set_session_id(f"demo_{int(time.time())}")
    logger.info("Starting TuneBridge demo...")

    try:
        run_demo(first_backend=args.backend or config.demo_backend,
                 supported_formats=config.supported_formats,
                 logger=logger,
                 default_backend=config.default_backend)
    except UnknownBackendError:
        logger.exception("Could not start demo")
        return 1

    logger.info(f"Session summary: {json.dumps(logger.get_session_summary())}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
