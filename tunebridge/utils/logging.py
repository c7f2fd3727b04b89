"""
Logging System for TuneBridge
Provides the application logger plus a structured playback log with session summaries
"""

import logging
import json
import time
import sys
from pathlib import Path
from typing import Dict, List, Optional, Any, Union
from dataclasses import dataclass, asdict
import numpy as np

@dataclass
class PlaybackLogEntry:
    """Structured log entry for a backend call"""
    timestamp: float
    session_id: str
    action: str  # 'play', 'pause'
    backend: str
    file_path: Optional[str] = None

class TuneBridgeLogger:
    """Logger for TuneBridge with a structured playback log"""

    def __init__(self,
                 log_dir: Union[str, Path] = "logs",
                 log_level: int = logging.INFO,
                 console_level: int = logging.WARNING,
                 max_file_size_mb: int = 10,
                 backup_count: int = 3,
                 enable_playback_logging: bool = True):

        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(exist_ok=True, parents=True)

        self.enable_playback_logging = enable_playback_logging
        self._setup_loggers(log_level, console_level, max_file_size_mb, backup_count)
        self.playback_log_file = self.log_dir / 'playback.jsonl'

        self._session_id = "main"
        self.logger.debug("TuneBridge logging system initialized")

    def _setup_loggers(self, log_level: int, console_level: int,
                       max_file_size_mb: int, backup_count: int):
        """Setup standard Python loggers"""
        from logging.handlers import RotatingFileHandler

        self.logger = logging.getLogger('tunebridge')
        self.logger.setLevel(log_level)

        # Clear existing handlers
        for handler in list(self.logger.handlers):
            handler.close()
        self.logger.handlers = []

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        file_handler = None
        try:
            file_handler = RotatingFileHandler(
                self.log_dir / 'tunebridge.log',
                maxBytes=max_file_size_mb * 1024 * 1024,
                backupCount=backup_count
            )
        except OSError as e:
            print(f"File handler error: {e}", file=sys.stderr)

        if file_handler:
            file_handler.setFormatter(formatter)
            file_handler.setLevel(logging.DEBUG)
            self.logger.addHandler(file_handler)

        # Console lines sit inside the demo trace, which must not vary between runs
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))
        console_handler.setLevel(console_level)
        self.logger.addHandler(console_handler)

        self.logger.propagate = False

    def set_session_id(self, session_id: str):
        """Set session ID used to tag playback entries"""
        self._session_id = session_id
        self.logger.info(f"Session started: {session_id}")

    def get_session_id(self) -> str:
        return self._session_id

    def log_playback(self, action: str, backend: str, file_path: Optional[str] = None):
        """Record one backend call in the structured playback log"""
        if not self.enable_playback_logging:
            return

        entry = PlaybackLogEntry(
            timestamp=time.time(),
            session_id=self.get_session_id(),
            action=action,
            backend=backend,
            file_path=file_path
        )
        self._write_structured_log(self.playback_log_file, entry)

    def _write_structured_log(self, file_path: Path, entry):
        """Write structured log entry to JSONL file"""
        try:
            file_path.parent.mkdir(exist_ok=True, parents=True)
            with open(file_path, 'a') as f:
                json.dump(asdict(entry), f, default=str)
                f.write('\n')
        except OSError as e:
            self.logger.error(f"Failed to write structured log: {e}")

    def _read_structured_logs(self, file_path: Path, session_id: str) -> List[Dict]:
        """Read structured logs for a specific session"""
        logs = []

        try:
            with open(file_path, 'r') as f:
                for line in f:
                    try:
                        data = json.loads(line.strip())
                        if data.get('session_id') == session_id:
                            logs.append(data)
                    except json.JSONDecodeError:
                        continue
        except FileNotFoundError:
            pass

        return logs

    def get_session_summary(self, session_id: Optional[str] = None) -> Dict[str, Any]:
        """Get summary statistics of the playback log for a session"""
        if session_id is None:
            session_id = self.get_session_id()

        events = self._read_structured_logs(self.playback_log_file, session_id)
        if not events:
            return {'session_id': session_id, 'count': 0}

        actions = [e['action'] for e in events]
        backends = [e['backend'] for e in events]

        summary = {
            'session_id': session_id,
            'count': len(events),
            'actions': {a: actions.count(a) for a in set(actions)},
            'backends': {b: backends.count(b) for b in set(backends)},
        }

        # A play lasts until whatever the backend was told next
        listening = [nxt['timestamp'] - cur['timestamp']
                     for cur, nxt in zip(events, events[1:])
                     if cur['action'] == 'play']
        if listening:
            summary['listening_seconds'] = {
                'mean': float(np.mean(listening)),
                'std': float(np.std(listening)),
                'max': float(np.max(listening)),
                'total': float(np.sum(listening))
            }

        return summary

    def info(self, message, *args, **kwargs):
        """Forward info calls to internal logger"""
        return self.logger.info(message, *args, **kwargs)

    def error(self, message, *args, **kwargs):
        """Forward error calls to internal logger"""
        return self.logger.error(message, *args, **kwargs)

    def warning(self, message, *args, **kwargs):
        """Forward warning calls to internal logger"""
        return self.logger.warning(message, *args, **kwargs)

    def debug(self, message, *args, **kwargs):
        """Forward debug calls to internal logger"""
        return self.logger.debug(message, *args, **kwargs)

    def exception(self, message, *args, **kwargs):
        """Forward exception calls to internal logger"""
        return self.logger.exception(message, *args, **kwargs)

    def critical(self, message, *args, **kwargs):
        """Forward critical calls to internal logger"""
        return self.logger.critical(message, *args, **kwargs)


# Global logger instance
_logger_instance = None


def get_logger() -> TuneBridgeLogger:
    """Get the global TuneBridge logger instance. Always use this in codebase, not logging.info() directly."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = TuneBridgeLogger(log_dir="logs", log_level=logging.DEBUG)
    return _logger_instance

def init_logger(log_dir: Union[str, Path] = "logs", log_level: int = logging.INFO,
                console_level: int = logging.WARNING,
                enable_playback_logging: bool = True) -> TuneBridgeLogger:
    """Initialize the global TuneBridge logger"""
    global _logger_instance
    _logger_instance = TuneBridgeLogger(log_dir=log_dir, log_level=log_level,
                                        console_level=console_level,
                                        enable_playback_logging=enable_playback_logging)
    return _logger_instance

def setup_logging(log_dir: Union[str, Path] = "logs", log_level: int = logging.INFO,
                  console_level: int = logging.WARNING,
                  enable_playback_logging: bool = True) -> TuneBridgeLogger:
    """Setup logging system and return configured logger"""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = TuneBridgeLogger(log_dir=log_dir, log_level=log_level,
                                            console_level=console_level,
                                            enable_playback_logging=enable_playback_logging)
    return _logger_instance

# Convenience functions
def log_playback(action: str, backend: str, file_path: Optional[str] = None):
    """Convenience function to log a backend call"""
    get_logger().log_playback(action, backend, file_path)

# NOTE: Always use get_logger() and logger.info()/debug()/error() in codebase, not logging.info() directly.
