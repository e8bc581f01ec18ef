import math

import numpy as np
import pytest

from cubescene.camera import Camera, CameraType
from cubescene.transforms import look_at, perspective


def test_defaults_match_initial_pose():
    cam = Camera(65.0)
    assert cam.camera_type is CameraType.FPS_CAMERA
    assert cam.flags == 0
    assert np.allclose(cam.position, [0.0, 0.0, 3.0])
    assert np.allclose(cam.front, [0.0, 0.0, -1.0])
    assert cam.yaw == -90.0


def test_look_at_matrix_uses_position_and_front():
    cam = Camera(65.0)
    cam.set_rotation(10.0, -60.0)
    expected = look_at(cam.position, cam.position + cam.front, cam.up)
    assert np.allclose(cam.look_at_matrix(), expected)


def test_projection_matrix_uses_fov_and_aspect():
    cam = Camera(65.0)
    expected = perspective(math.radians(65.0), 1920 / 1080, 0.1, 100.0)
    assert np.allclose(cam.projection_matrix(1920, 1080), expected)


def test_projection_matrix_zero_height_raises():
    with pytest.raises(ValueError):
        Camera(65.0).projection_matrix(800, 0)


def test_initial_rotation_reproduces_initial_front():
    cam = Camera(65.0)
    before = cam.front.copy()
    cam.set_rotation(0.0, -90.0)
    assert np.allclose(cam.front, before)


def test_clamp_limits_pitch():
    cam = Camera(65.0, Camera.CLAMP_ROTATION)
    cam.set_rotation(120.0, -90.0)
    assert cam.pitch == 89.0
    cam.rotate_by(-400.0, 0.0)
    assert cam.pitch == -89.0


def test_without_clamp_pitch_is_free():
    cam = Camera(65.0)
    cam.set_rotation(120.0, -90.0)
    assert cam.pitch == 120.0


def test_rotate_by_accumulates():
    a = Camera(65.0)
    b = Camera(65.0)
    a.rotate_by(10.0, 5.0)
    a.rotate_by(10.0, 5.0)
    b.rotate_by(20.0, 10.0)
    assert np.allclose(a.front, b.front)
    assert a.pitch == pytest.approx(b.pitch)


def test_front_is_always_unit_length():
    cam = Camera(65.0)
    cam.rotate_by(33.0, 71.0)
    assert np.linalg.norm(cam.front) == pytest.approx(1.0)


def test_fps_camera_stays_in_horizontal_plane():
    cam = Camera(65.0, Camera.CLAMP_ROTATION, CameraType.FPS_CAMERA)
    cam.set_rotation(45.0, -90.0)
    start = cam.position.copy()
    cam.move_by_relative(1.0, 0.0, 0.0)
    assert cam.position[1] == pytest.approx(start[1])
    assert np.linalg.norm(cam.position - start) == pytest.approx(1.0)


def test_free_camera_moves_along_view_direction():
    cam = Camera(65.0, 0, CameraType.FREE_CAMERA)
    cam.set_rotation(45.0, -90.0)
    start = cam.position.copy()
    cam.move_by_relative(1.0, 0.0, 0.0)
    assert np.allclose(cam.position - start, cam.front)


def test_right_move_is_perpendicular_to_front_and_up():
    cam = Camera(65.0)
    start = cam.position.copy()
    cam.move_by_relative(0.0, 0.0, 2.0)
    delta = cam.position - start
    assert np.linalg.norm(delta) == pytest.approx(2.0)
    assert delta @ cam.front == pytest.approx(0.0)
    assert delta @ cam.up == pytest.approx(0.0)
    assert delta[0] > 0


def test_up_delta_does_not_move_camera():
    cam = Camera(65.0)
    start = cam.position.copy()
    cam.move_by_relative(0.0, 5.0, 0.0)
    assert np.allclose(cam.position, start)