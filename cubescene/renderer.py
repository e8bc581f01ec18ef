"""Draws every registered object from a camera's point of view."""

from __future__ import annotations

from cubescene.camera import Camera
from cubescene.scene_object import Renderable


class SceneRenderer:
    """Holds renderable objects and draws them with a camera's matrices."""

    def __init__(self, camera: Camera):
        self.camera = camera
        self.viewport_size: tuple[int, int] = (1920, 1080)
        self._objects: list[Renderable] = []

    @property
    def objects(self) -> tuple[Renderable, ...]:
        return tuple(self._objects)

    def register_object(self, obj: Renderable) -> None:
        self._objects.append(obj)

    def render_all(self) -> None:
        """Render each object, in registration order."""
        width, height = self.viewport_size
        projection = self.camera.projection_matrix(width, height)
        view = self.camera.look_at_matrix()
        for obj in self._objects:
            obj.render(projection, view)