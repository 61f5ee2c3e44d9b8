import logging

from conftest import FakeParser, make_baked

from scene_ir.extract_profiles import BakeConfig
from scene_ir.native.native_objects import (
    NativeScene, AnimStack, BakedAnim, BakedNode, BakedVec3, BakedQuat,
)
from scene_ir.animation.sg_animation import bake_animations, copy_baked_track


def test_failed_stack_is_skipped_and_next_stack_kept(caplog):
    scene = NativeScene(anim_stacks=[
        AnimStack(0, b"Broken", "curve evaluation failed"),
        AnimStack(1, b"Good", make_baked(0)),
    ])
    parser = FakeParser(scene)
    with caplog.at_level(logging.WARNING, logger="scene_ir_anim"):
        tracks, failures = bake_animations(parser, scene)

    assert len(tracks) == 1
    assert tracks[0].id == 1
    assert tracks[0].name == "Good"
    assert len(failures) == 1
    assert failures[0].stack_id == 0
    assert failures[0].description == "curve evaluation failed"
    assert "curve evaluation failed" in caplog.text


def test_channels_emitted_translation_rotation_scale_per_node():
    baked = BakedAnim(nodes=[
        BakedNode(5,
                  translation_keys=[BakedVec3(0.0, (1.0, 0.0, 0.0)), BakedVec3(1.0, (2.0, 0.0, 0.0))],
                  rotation_keys=[BakedQuat(0.0, (0.0, 0.0, 0.0, 1.0))],
                  scale_keys=[BakedVec3(0.5, (3.0, 3.0, 3.0))]),
        BakedNode(2, rotation_keys=[BakedQuat(0.25, (0.0, 1.0, 0.0, 0.0))]),
    ])
    track = copy_baked_track(AnimStack(9, b"Take"), baked)

    layout = [(k.node_id, k.channel, k.time) for k in track.keyframes]
    assert layout == [
        (5, "translation", 0.0),
        (5, "translation", 1.0),
        (5, "rotation", 0.0),
        (5, "scale", 0.5),
        (2, "rotation", 0.25),
    ]
    assert track.id == 9
    assert track.node_ids() == [5, 2]


def test_keyframe_carries_exactly_one_channel():
    track = copy_baked_track(AnimStack(0), make_baked(1))
    for key in track.keyframes:
        d = key.to_dict()
        channels = [c for c in ("translation", "rotation", "scale") if c in d]
        assert len(channels) == 1
        assert d['node_id'] == 1
    rotation = [k for k in track.keyframes if k.channel == "rotation"][0]
    assert len(rotation.value) == 4


def test_keyframes_for_each_node_are_contiguous():
    baked = BakedAnim(nodes=[BakedNode(i, translation_keys=[BakedVec3(0.0, (0, 0, 0))],
                                       scale_keys=[BakedVec3(0.0, (1, 1, 1))])
                             for i in (3, 1, 2)])
    track = copy_baked_track(AnimStack(0), baked)
    ids = [k.node_id for k in track.keyframes]
    assert ids == [3, 3, 1, 1, 2, 2]


def test_sample_rate_forwarded_and_baked_buffers_released():
    baked = make_baked(0)
    scene = NativeScene(anim_stacks=[AnimStack(0, b"Take", baked)])
    parser = FakeParser(scene)
    bake_animations(parser, scene, BakeConfig(sample_rate=24.0))
    assert parser.bake_opts[0].resample_rate == 24.0
    assert parser.freed_baked == [baked]


def test_default_sample_rate_is_thirty():
    scene = NativeScene(anim_stacks=[AnimStack(0, b"Take", make_baked(0))])
    parser = FakeParser(scene)
    bake_animations(parser, scene)
    assert parser.bake_opts[0].resample_rate == 30.0


def test_track_does_not_alias_baker_memory():
    baked = make_baked(0)
    track = copy_baked_track(AnimStack(0), baked)
    baked.nodes[0].translation_keys.clear()
    assert len(track.keyframes) == 6


def test_tracks_follow_stack_order():
    scene = NativeScene(anim_stacks=[
        AnimStack(2, b"C", make_baked(0)),
        AnimStack(0, b"A", make_baked(0)),
        AnimStack(1, b"B", make_baked(0)),
    ])
    tracks, _ = bake_animations(FakeParser(scene), scene)
    assert [t.id for t in tracks] == [2, 0, 1]
