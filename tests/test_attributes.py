from scene_ir.native.native_objects import MaterialMap
from scene_ir.scene_graph.sg_attributes import resolve_attribute, resolve_vec3


def test_first_qualifying_candidate_wins():
    first = MaterialMap((1.0, 0.0, 0.0))
    second = MaterialMap((0.0, 1.0, 0.0))
    assert resolve_attribute([first, second]) is first


def test_skips_candidates_without_value():
    missing = MaterialMap()
    legacy = MaterialMap((0.25, 0.5, 0.75))
    assert resolve_vec3([missing, legacy]) == (0.25, 0.5, 0.75)


def test_skips_candidates_with_too_few_components():
    scalar = MaterialMap((0.9, 0.0, 0.0), value_components=1)
    legacy = MaterialMap((0.1, 0.2, 0.3))
    assert resolve_vec3([scalar, legacy]) == (0.1, 0.2, 0.3)


def test_absent_when_nothing_qualifies():
    assert resolve_vec3([MaterialMap(), MaterialMap()]) is None
    assert resolve_vec3([]) is None
    assert resolve_vec3([None, MaterialMap()]) is None


def test_four_component_value_is_truncated_to_three():
    rgba = MaterialMap((0.1, 0.2, 0.3, 1.0))
    assert rgba.value_components == 4
    assert resolve_vec3([rgba]) == (0.1, 0.2, 0.3)


def test_resolution_has_no_side_effects():
    cand = MaterialMap((1.0, 1.0, 1.0))
    resolve_vec3([cand])
    resolve_vec3([cand])
    assert cand.has_value
    assert cand.value_vec3 == (1.0, 1.0, 1.0)
