"""Load entry points (path or in-memory bytes) producing a SceneIR."""
