"""IR persistence: wire dicts and JSON documents."""
