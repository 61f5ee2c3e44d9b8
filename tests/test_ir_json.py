import json

import pytest

from conftest import FakeParser

from scene_ir import load_from_path
from scene_ir.ir_format.ir_json import (
    dumps, save_json, load_json, scene_from_dict, to_json_document,
)


@pytest.fixture
def rich_ir(rich_scene):
    return load_from_path("rich.fbx", parser=FakeParser(rich_scene))


def test_wire_dict_has_no_null_values(rich_ir):
    def walk(value):
        if isinstance(value, dict):
            for v in value.values():
                assert v is not None
                walk(v)
        elif isinstance(value, list):
            for v in value:
                walk(v)
    walk(rich_ir.to_dict())


def test_wire_dict_top_level_keys(rich_ir):
    assert sorted(rich_ir.to_dict()) == [
        'animations', 'materials', 'meshes', 'nodes', 'textures', 'version',
    ]


def test_document_uses_camel_case(rich_ir):
    doc = to_json_document(rich_ir)
    arm = doc['nodes'][1]
    assert arm['parentId'] == 0
    assert arm['meshId'] == 0
    assert 'parent_id' not in arm
    assert doc['meshes'][0]['materialIds'] == [0, 1]
    assert doc['materials'][0]['diffuseColor'] == [1.0, 0.0, 0.0]
    assert doc['textures'][0]['filePath'] == "textures/diffuse.png"
    assert doc['animations'][0]['keyframes'][0]['nodeId'] == 1


def test_scene_from_dict_rebuilds_equal_ir(rich_ir):
    wire = json.loads(dumps(rich_ir))
    assert scene_from_dict(wire) == rich_ir


def test_save_and_load_json(tmp_path, rich_ir):
    target = tmp_path / "out" / "scene.json"
    save_json(str(target), rich_ir)
    data = load_json(str(target))
    assert data['version'] == "7.5"
    assert data == json.loads(dumps(rich_ir))


def test_keyframe_with_two_channels_rejected():
    data = {
        'version': "7.4",
        'animations': [{
            'id': 0, 'name': "Bad",
            'keyframes': [{'node_id': 0, 'time': 0.0,
                           'translation': [0, 0, 0], 'scale': [1, 1, 1]}],
        }],
    }
    with pytest.raises(ValueError):
        scene_from_dict(data)
