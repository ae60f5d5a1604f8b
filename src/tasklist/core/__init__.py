"""Core wiring shared by connectors: ports (Protocols) and AppState."""
