"""Animation baking: animation stacks -> per-node keyframe streams."""
