"""Scene graph flattening: native entities -> id-addressed IR records."""
