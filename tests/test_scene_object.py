import math
import re

import numpy as np
import pytest

from cubescene.scene_object import (
    MeshData,
    Renderable,
    SceneObject,
    SceneObjectBehaviour,
    SceneObjectType,
)


@pytest.fixture
def cube():
    return SceneObject(SceneObjectType.SIMPLE_CUBE, None, MeshData(36, 7))


def test_new_object_is_at_origin_unrotated(cube):
    assert np.allclose(cube.position, 0.0)
    assert np.allclose(cube.euler_rotation, 0.0)
    assert dict(cube.shader_ints) == {}


def test_uuod_format(cube):
    match = re.fullmatch(r"UUOD-(\d+)", cube.uuod)
    assert match is not None
    assert 0 <= int(match.group(1)) < 10_000_000


def test_position_setter_copies(cube):
    pos = np.array([2.0, 5.0, -15.0])
    cube.position = pos
    pos[0] = 99.0
    assert np.allclose(cube.position, [2.0, 5.0, -15.0])


def test_position_rejects_wrong_shape(cube):
    cube.position = [4.0, 5.0, 6.0]
    with pytest.raises(ValueError):
        cube.position = [1.0, 2.0]
    assert np.allclose(cube.position, [4.0, 5.0, 6.0])


def test_copy_is_independent(cube):
    cube.set_shader_int("texture1", 0)
    cube.set_shader_float("mix", 0.25)
    cube.position = [1.0, 2.0, 3.0]
    clone = cube.copy()
    assert dict(clone.shader_ints) == {"texture1": 0}
    assert dict(clone.shader_floats) == {"mix": 0.25}
    assert np.allclose(clone.position, cube.position)
    assert clone.mesh == cube.mesh
    assert clone.object_type is cube.object_type
    clone.set_shader_int("texture2", 1)
    clone.position = [0.0, 0.0, 0.0]
    assert "texture2" not in cube.shader_ints
    assert np.allclose(cube.position, [1.0, 2.0, 3.0])
    assert clone.uuod.startswith("UUOD-")
    assert clone.uuod != cube.uuod


def test_model_matrix_without_rotation_is_translation(cube):
    cube.position = [-1.5, -2.2, -2.5]
    m = cube.model_matrix()
    assert np.allclose(m[:3, :3], np.identity(3))
    assert np.allclose(m[:3, 3], [-1.5, -2.2, -2.5])


def test_model_matrix_with_rotation_is_rigid(cube):
    cube.euler_rotation = [0.3, 1.2, -0.7]
    cube.position = [1.0, 2.0, 3.0]
    m = cube.model_matrix()
    r = m[:3, :3]
    assert np.allclose(r @ r.T, np.identity(3))
    assert np.linalg.det(r) == pytest.approx(1.0)
    assert np.linalg.norm(m[:3, 3]) == pytest.approx(math.sqrt(14.0))


def test_render_without_shader_raises(cube):
    with pytest.raises(RuntimeError):
        cube.render(np.identity(4), np.identity(4))


def test_debug_state_contents(cube):
    cube.position = [1.0, 2.5, -3.0]
    cube.set_shader_int("texture1", 0)
    text = cube.debug_state()
    lines = text.splitlines()
    assert lines[0] == f"{cube.uuod}: {{ "
    assert "    type: 0," in lines
    assert "    position: (1, 2.5, -3)," in lines
    assert "        VAO: 7," in lines
    assert "        verticesToDraw: 36," in lines
    assert "        texture1: 0," in lines
    assert lines[-1] == "}"


def test_log_state_debug_prints_state(cube, capsys):
    cube.log_state_debug()
    assert capsys.readouterr().out == cube.debug_state()


def test_light_source_type_value():
    obj = SceneObject(SceneObjectType.LIGHT_SOURCE, None, MeshData(36, 1))
    assert "    type: 1," in obj.debug_state().splitlines()


def test_abstract_bases_cannot_be_instantiated():
    with pytest.raises(TypeError):
        SceneObjectBehaviour()
    with pytest.raises(TypeError):
        Renderable()