import pytest

from cubescene.shader import Shader, ShaderError, read_shader_sources

VERTEX = "#version 330 core\nvoid main() { gl_Position = vec4(0.0); }\n"
FRAGMENT = "#version 330 core\nout vec4 c;\nvoid main() { c = vec4(1.0); }\n"


@pytest.fixture
def shader_files(tmp_path):
    vert = tmp_path / "vert0.vert"
    frag = tmp_path / "frag0.frag"
    vert.write_text(VERTEX)
    frag.write_text(FRAGMENT)
    return vert, frag


def test_read_shader_sources_returns_both_texts(shader_files):
    vert, frag = shader_files
    assert read_shader_sources(vert, frag) == (VERTEX, FRAGMENT)


def test_read_shader_sources_accepts_strings(shader_files):
    vert, frag = shader_files
    vertex_code, fragment_code = read_shader_sources(str(vert), str(frag))
    assert vertex_code == VERTEX
    assert fragment_code == FRAGMENT


def test_missing_vertex_file_raises(shader_files, tmp_path):
    _, frag = shader_files
    with pytest.raises(ShaderError):
        read_shader_sources(tmp_path / "absent.vert", frag)


def test_missing_fragment_file_raises(shader_files, tmp_path):
    vert, _ = shader_files
    with pytest.raises(ShaderError):
        read_shader_sources(vert, tmp_path / "absent.frag")


def test_shader_with_missing_files_raises(tmp_path):
    with pytest.raises(ShaderError, match="not successfully read"):
        Shader(tmp_path / "a.vert", tmp_path / "b.frag")