"""Reference integrity checks for an assembled SceneIR.

Checks:
    IR-001  every parent_id references a node in the IR
    IR-002  every child id references a node in the IR
    IR-003  parent/children relations agree in both directions
    IR-004  every mesh_id references a mesh
    IR-005  every material id on a mesh references a material
    IR-006  every mesh index is a valid offset into its positions
    IR-007  node ids are unique
    IR-008  every keyframe node_id references a node
"""

from enum import Enum


class ValidationSeverity(Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"


class ValidationResult:
    """Single validation check result."""

    def __init__(self, check_id, severity, passed, message, details=None):
        """
        Args:
            check_id: Identifier of the check (e.g. 'IR-003').
            severity: ValidationSeverity value.
            passed: True if the check passed.
            message: Short human-readable description of the result.
            details: Optional list of offending entries.
        """
        self.check_id = check_id
        self.severity = severity
        self.passed = passed
        self.message = message
        self.details = details or []

    def __repr__(self):
        status = "PASS" if self.passed else "FAIL"
        return "ValidationResult({}, {}, {}, {!r})".format(
            self.check_id, self.severity.value, status, self.message
        )


def _result(check_id, problems, ok_message, fail_message,
            severity=ValidationSeverity.ERROR):
    if problems:
        return ValidationResult(check_id, severity, False,
                                fail_message.format(len(problems)), problems)
    return ValidationResult(check_id, severity, True, ok_message)


def validate_scene(ir):
    """Run every integrity check on ``ir``.

    Returns:
        list of ValidationResult, one per check, in check id order.
    """
    node_ids = [n.id for n in ir.nodes]
    nodes = {n.id: n for n in ir.nodes}
    mesh_ids = {m.id for m in ir.meshes}
    material_ids = {m.id for m in ir.materials}
    results = []

    problems = [(n.id, n.parent_id) for n in ir.nodes
                if n.parent_id is not None and n.parent_id not in nodes]
    results.append(_result("IR-001", problems,
                           "All parent ids resolve",
                           "{} node(s) reference a missing parent"))

    problems = [(n.id, c) for n in ir.nodes for c in n.children if c not in nodes]
    results.append(_result("IR-002", problems,
                           "All child ids resolve",
                           "{} child reference(s) point to missing nodes"))

    problems = []
    for node in ir.nodes:
        if node.parent_id in nodes and node.id not in nodes[node.parent_id].children:
            problems.append((node.id, node.parent_id))
        for child_id in node.children:
            if child_id in nodes and nodes[child_id].parent_id != node.id:
                problems.append((child_id, node.id))
    results.append(_result("IR-003", problems,
                           "Parent/children relations are consistent",
                           "{} inconsistent parent/child pair(s)"))

    problems = [(n.id, n.mesh_id) for n in ir.nodes
                if n.mesh_id is not None and n.mesh_id not in mesh_ids]
    results.append(_result("IR-004", problems,
                           "All mesh ids resolve",
                           "{} node(s) reference a missing mesh"))

    problems = [(m.id, mid) for m in ir.meshes for mid in m.material_ids
                if mid not in material_ids]
    results.append(_result("IR-005", problems,
                           "All material ids resolve",
                           "{} mesh material reference(s) are missing"))

    problems = []
    for mesh in ir.meshes:
        if mesh.indices is None:
            continue
        limit = mesh.num_verts
        bad = [i for i in mesh.indices if i >= limit]
        if bad:
            problems.append((mesh.id, len(bad)))
    results.append(_result("IR-006", problems,
                           "All indices are within their position buffers",
                           "{} mesh(es) have out-of-range indices"))

    seen = set()
    problems = []
    for nid in node_ids:
        if nid in seen:
            problems.append(nid)
        seen.add(nid)
    results.append(_result("IR-007", problems,
                           "Node ids are unique",
                           "{} duplicate node id(s)"))

    problems = [(a.id, k.node_id) for a in ir.animations for k in a.keyframes
                if k.node_id not in nodes]
    results.append(_result("IR-008", problems,
                           "All keyframe node ids resolve",
                           "{} keyframe(s) reference missing nodes",
                           ValidationSeverity.WARNING))

    return results


def failed_checks(results):
    """Return only the failing results."""
    return [r for r in results if not r.passed]
