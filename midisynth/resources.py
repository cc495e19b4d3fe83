"""Locating the resources directory and pacing the main loop."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path

from midisynth.logger import LogLevel, get_logger

__all__ = [
    "LOGO_DIR",
    "INSTRUMENTS_DIR",
    "INSTRUMENTS_EXTENSION",
    "RESOURCES_FOLDER",
    "ApplicationPath",
    "ResourcesNotFoundError",
    "FramePacer",
    "find_resources_folder",
]

LOGO_DIR = "logo"
INSTRUMENTS_DIR = "instruments"
INSTRUMENTS_EXTENSION = ".json"
RESOURCES_FOLDER = "resources"


@dataclass(frozen=True)
class ApplicationPath:
    """Where the application lives and where its resources are."""

    application: Path
    resource_directory: Path


class ResourcesNotFoundError(FileNotFoundError):
    """Raised when no resources directory is found above the application."""


def find_resources_folder(application_path: Path | str, verbose: bool = False) -> Path:
    """Look for a 'resources' directory next to the application, then in each parent."""
    logger = get_logger()
    path = Path(application_path).parent / RESOURCES_FOLDER
    if verbose:
        logger.log("Resources", LogLevel.DEBUG, f"trying path: {path}")
    while not path.exists():
        path = path.parent
        if path == Path(path.anchor):
            logger.log("Resources", LogLevel.ERROR, "Could not find resources directory.")
            raise ResourcesNotFoundError("Could not find resources directory.")
        path = path.parent / RESOURCES_FOLDER
        if verbose:
            logger.log("Resources", LogLevel.DEBUG, f"trying path: {path}")
    logger.log("Resources", LogLevel.INFO, f"Found resources at: {path}")
    return path


class FramePacer:
    """Holds each frame of the main loop to the target frame rate."""

    def __init__(self, target_fps: int = 60, latency: int = 3) -> None:
        if target_fps <= 0:
            raise ValueError("target_fps must be positive")
        self.target_fps = target_fps
        self.latency = latency
        self.frame_duration = 1.0 / target_fps

    def wait(self, start_time: float) -> bool:
        """Wait until a frame begun at start_time (a perf_counter value) has lasted long enough.

        Returns True when the frame overran by more than the latency allows,
        meaning audio may have run dry.
        """
        elapsed = time.perf_counter() - start_time
        remaining = self.frame_duration - elapsed
        if remaining > 0.0:
            time.sleep(remaining * 0.9)
            while time.perf_counter() - start_time < self.frame_duration:
                pass
            return False

        max_allowed_lag = self.frame_duration * self.latency
        if elapsed - self.frame_duration > max_allowed_lag:
            get_logger().log("Audio", LogLevel.WARNING, "lag exceeded cursors safety gap")
            return True
        return False