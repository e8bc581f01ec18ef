"""A first-person or free-flying camera."""

from __future__ import annotations

import math
from enum import Enum

import numpy as np

from cubescene.transforms import look_at, normalize, perspective


class CameraType(Enum):
    """How the camera moves relative to where it looks."""

    FREE_CAMERA = 0
    FPS_CAMERA = 1


class Camera:
    """A camera with a position, a viewing direction and a field of view."""

    CLAMP_ROTATION = 1
    NEAR_PLANE = 0.1
    FAR_PLANE = 100.0
    PITCH_LIMIT = 89.0

    def __init__(self, fov, flags=0, camera_type=CameraType.FPS_CAMERA):
        self.fov = float(fov)
        self.flags = int(flags)
        self.camera_type = CameraType(camera_type)
        self._yaw = -90.0
        self._pitch = 0.0
        self.position = np.array([0.0, 0.0, 3.0])
        self.front = np.array([0.0, 0.0, -1.0])
        self.up = np.array([0.0, 1.0, 0.0])

    @property
    def pitch(self) -> float:
        return self._pitch

    @property
    def yaw(self) -> float:
        return self._yaw

    def look_at_matrix(self) -> np.ndarray:
        """View matrix for the current position and direction."""
        return look_at(self.position, self.position + self.front, self.up)

    def projection_matrix(self, width, height) -> np.ndarray:
        """Perspective projection for a viewport of the given size."""
        if height == 0:
            raise ValueError("viewport height must be non-zero")
        return perspective(
            math.radians(self.fov),
            float(width) / float(height),
            self.NEAR_PLANE,
            self.FAR_PLANE,
        )

    def move_by_relative(self, front_delta, up_delta, right_delta) -> None:
        """Move along the viewing direction and to its right.

        An FPS camera moves in the horizontal plane only; ``up_delta`` is
        accepted but does not move the camera.
        """
        forward = self.front.copy()
        if self.camera_type is CameraType.FPS_CAMERA:
            forward[1] = 0.0
            forward = normalize(forward)
        self.position = self.position + forward * front_delta
        self.position = self.position + normalize(np.cross(forward, self.up)) * right_delta

    def rotate_by(self, pitch_delta, yaw_delta) -> None:
        """Turn the camera by the given angles in degrees."""
        self._pitch += pitch_delta
        self._yaw += yaw_delta
        self._update_front()

    def set_rotation(self, pitch, yaw) -> None:
        """Point the camera at the given angles in degrees."""
        self._pitch = float(pitch)
        self._yaw = float(yaw)
        self._update_front()

    def _update_front(self) -> None:
        if self.flags & Camera.CLAMP_ROTATION:
            self._pitch = max(-self.PITCH_LIMIT, min(self.PITCH_LIMIT, self._pitch))
        yaw = math.radians(self._yaw)
        pitch = math.radians(self._pitch)
        direction = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.front = normalize(direction)