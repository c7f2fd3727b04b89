#!/usr/bin/env python3
"""
Unit tests for MusicPlayer delegation and playlist navigation
Backends and the logger are replaced with mocks so only the player logic is exercised
"""

import sys
import os
import io
import tempfile
from contextlib import redirect_stdout
from unittest.mock import Mock, call

# Add project root to path (tests/unit subdirectory)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from tunebridge.core.library import Song, Playlist
from tunebridge.core.playback import (
    MusicPlayer, PlayerImplementation, WindowsPlayer, LinuxPlayer
)
from tunebridge.utils.logging import TuneBridgeLogger, init_logger

# Backends log through the global logger; keep its files out of the working tree
init_logger(log_dir=tempfile.mkdtemp(), enable_playback_logging=False)

A = Song("A", "a.mp3")
B = Song("B", "b.wav")


def make_backend(name="mock"):
    backend = Mock(spec=PlayerImplementation)
    backend.name = name
    return backend


def make_player(songs=(), backend=None):
    playlist = Playlist("Test")
    for song in songs:
        playlist.add_song(song)
    backend = backend or make_backend()
    logger = Mock(spec=TuneBridgeLogger)
    return MusicPlayer(playlist, backend, logger=logger), backend, logger


def test_initial_state():
    player, backend, _ = make_player([A, B])
    assert player.current_song is None
    assert player.current_index == 0
    assert not player.is_playing
    assert not player.is_repeat
    assert player.implementation is backend


def test_empty_playlist_is_noop():
    """play/next/previous on an empty playlist never reach the backend"""
    player, backend, _ = make_player()

    player.play()
    player.next()
    player.previous()

    backend.play_audio.assert_not_called()
    backend.pause_audio.assert_not_called()
    assert player.current_song is None
    assert player.current_index == 0
    assert not player.is_playing
    print("✓ Empty playlist no-ops")


def test_play_delegates_current_song():
    player, backend, logger = make_player([A, B])

    player.play()

    backend.play_audio.assert_called_once_with("a.mp3")
    assert player.current_song == A
    assert player.is_playing
    logger.log_playback.assert_called_once_with('play', 'mock', 'a.mp3')


def test_next_wraps_around():
    songs = [Song(str(i), f"{i}.mp3") for i in range(4)]
    player, backend, _ = make_player(songs)

    visited = []
    for _ in range(len(songs)):
        player.next()
        visited.append(player.current_index)

    assert visited == [1, 2, 3, 0]
    assert player.current_song == songs[0]
    assert backend.play_audio.call_args_list == [
        call("1.mp3"), call("2.mp3"), call("3.mp3"), call("0.mp3")
    ]
    print("✓ next() wraps around")


def test_previous_wraps_and_inverts_next():
    player, _, _ = make_player([A, B, Song("C", "c.mp3")])

    player.previous()
    assert player.current_index == 2

    player.next()
    player.previous()
    assert player.current_index == 2


def test_play_after_removing_current_song():
    """Index stays inside the playlist when songs are removed under it"""
    player, backend, _ = make_player([A, B])
    playlist = player._get_playlist()

    player.next()
    assert player.current_index == 1
    assert playlist.remove_song(B)

    player.play()

    assert player.current_index == 0
    assert player.current_song == A
    assert backend.play_audio.call_args_list == [call("b.wav"), call("a.mp3")]
    print("✓ Index kept valid after remove_song")


def test_pause_only_after_play():
    player, backend, _ = make_player([A, B])

    player.pause()
    backend.pause_audio.assert_not_called()

    player.play()
    player.pause()
    player.pause()
    assert backend.pause_audio.call_count == 1
    assert not player.is_playing


def test_play_song_bypasses_playlist():
    """play_song plays anything and leaves the index alone"""
    player, backend, _ = make_player([A, B])
    outsider = Song("X", "x.ogg")

    player.play_song(outsider)

    backend.play_audio.assert_called_once_with("x.ogg")
    assert player.current_song == outsider
    assert player.current_index == 0
    assert player.is_playing


def test_unsupported_format_still_played():
    """flac is not supported, yet the backend is still asked to play it"""
    player, backend, logger = make_player([A, B])

    player.play_song(Song("X", "x.flac"))

    backend.play_audio.assert_called_once_with("x.flac")
    assert logger.warning.call_count == 1
    assert "flac" in logger.warning.call_args[0][0]


def test_supported_format_not_warned():
    player, _, logger = make_player([A, B])
    player.play()
    player.play_song(B)
    logger.warning.assert_not_called()


def test_custom_supported_formats():
    playlist = Playlist("Lossless")
    playlist.add_song(Song("L", "l.flac"))
    logger = Mock(spec=TuneBridgeLogger)
    player = MusicPlayer(playlist, make_backend(), logger=logger, supported_formats=["flac"])

    player.play()
    logger.warning.assert_not_called()


def test_repeat_toggles_only_flag():
    player, backend, _ = make_player([A, B])

    player.repeat()
    assert player.is_repeat
    player.repeat()
    assert not player.is_repeat
    backend.play_audio.assert_not_called()


def test_swap_implementation_at_runtime():
    first, second = make_backend("first"), make_backend("second")
    player, _, _ = make_player([A, B], backend=first)

    player.play()
    player.implementation = second
    player.pause()
    player.next()

    first.play_audio.assert_called_once_with("a.mp3")
    first.pause_audio.assert_not_called()
    second.pause_audio.assert_called_once_with()
    second.play_audio.assert_called_once_with("b.wav")


def run_scenario(backend):
    player, _, _ = make_player([A, B], backend=backend)
    out = io.StringIO()
    with redirect_stdout(out):
        player.play()
        player.pause()
        player.play_song(B)
    return out.getvalue().splitlines()


def test_scenario_output_determined_by_backend():
    """Same calls, different backend, different trace"""
    assert run_scenario(WindowsPlayer()) == [
        "Playing audio on Windows: a.mp3",
        "Pausing audio on Windows",
        "Playing audio on Windows: b.wav",
    ]
    assert run_scenario(LinuxPlayer()) == [
        "Playing audio on Linux: a.mp3",
        "Pausing audio on Linux",
        "Playing audio on Linux: b.wav",
    ]
    print("✓ Bridge scenario")


if __name__ == "__main__":
    for name, func in list(globals().items()):
        if name.startswith("test_") and callable(func):
            func()
    print("All music player tests passed")
