"""A behaviour that spins an object about its x axis."""

from __future__ import annotations

from cubescene.scene_object import SceneObject, SceneObjectBehaviour


class ExampleRotationScript(SceneObjectBehaviour):
    """Turns the object about x at a fixed rate per second."""

    SPEED = 8.0

    def on_update(self, obj: SceneObject, delta_time: float) -> None:
        rotation = obj.euler_rotation
        rotation[0] += delta_time * self.SPEED
        obj.euler_rotation = rotation