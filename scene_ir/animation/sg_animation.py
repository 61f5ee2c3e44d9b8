"""Bake animation stacks into discrete keyframe tracks.

Curve evaluation belongs to the asset parser: for every animation stack we
ask it to resample the stack's animation at a fixed rate, then copy the
result into an IRAnimationTrack.

Baked result layout (per stack):

BakedAnim.nodes: list of BakedNode, in the resampler's own node order
BakedNode:
    typed_id          - id of the animated node
    translation_keys  - BakedVec3 list (time, (x, y, z)), increasing time
    rotation_keys     - BakedQuat list (time, (x, y, z, w)), increasing time
    scale_keys        - BakedVec3 list (time, (x, y, z)), increasing time

Track layout produced here: for each baked node in order, all translation
keys, then all rotation keys, then all scale keys. Every keyframe is tagged
with its node id and holds exactly one channel.

A stack the resampler rejects is skipped: it yields no track and the
remaining stacks are still baked.
"""

import logging
from typing import List, Tuple

from ..errors import BakeFailure
from ..extract_profiles import BakeConfig
from ..native.native_parser import BakeError, BakeOptions
from ..scene_graph.sg_classes import (
    IRAnimationTrack, IRKeyframe,
    CHANNEL_TRANSLATION, CHANNEL_ROTATION, CHANNEL_SCALE,
)
from ..utils.buffers import copy_name, copy_vector

_log = logging.getLogger("scene_ir_anim")


# Channel -> (BakedNode attribute, component count)
_CHANNEL_KEYS = (
    (CHANNEL_TRANSLATION, 'translation_keys', 3),
    (CHANNEL_ROTATION, 'rotation_keys', 4),
    (CHANNEL_SCALE, 'scale_keys', 3),
)


def _copy_baked_node(baked_node, keyframes):
    """Append the keyframes of one baked node, channel by channel."""
    node_id = int(baked_node.typed_id)
    for channel, attr, components in _CHANNEL_KEYS:
        for key in getattr(baked_node, attr):
            keyframes.append(IRKeyframe(
                node_id=node_id,
                time=float(key.time),
                channel=channel,
                value=copy_vector(key.value, components),
            ))


def copy_baked_track(stack, baked) -> IRAnimationTrack:
    """Copy one baked animation into an IRAnimationTrack owned by the IR."""
    keyframes = []
    for baked_node in baked.nodes:
        _copy_baked_node(baked_node, keyframes)
    return IRAnimationTrack(
        id=int(stack.typed_id),
        name=copy_name(stack.name),
        keyframes=tuple(keyframes),
    )


def bake_animations(parser, scene, config=None) -> Tuple[List[IRAnimationTrack], List[BakeFailure]]:
    """Bake every animation stack of ``scene``.

    Args:
        parser: AssetParser that loaded ``scene`` (provides bake_anim)
        scene: native scene
        config: BakeConfig (defaults to 30 samples per unit)

    Returns:
        (tracks, failures): one track per successfully baked stack in stack
        order, and one BakeFailure per skipped stack.
    """
    if config is None:
        config = BakeConfig()
    opts = BakeOptions(resample_rate=config.sample_rate)

    tracks = []
    failures = []
    for stack in scene.anim_stacks:
        try:
            baked = parser.bake_anim(scene, stack.anim, opts)
        except BakeError as exc:
            failure = BakeFailure(int(stack.typed_id), copy_name(stack.name), exc.description)
            _log.warning("Skipping animation: %s", failure)
            failures.append(failure)
            continue

        try:
            num_nodes = len(baked.nodes)
            track = copy_baked_track(stack, baked)
        finally:
            parser.free_baked_anim(baked)

        _log.debug("Baked animation %d (%r): %d nodes, %d keyframes",
                   track.id, track.name, num_nodes, len(track.keyframes))
        tracks.append(track)

    return tracks, failures
