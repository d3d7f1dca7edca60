"""Domain layer: signatures, text rendering and the error taxonomy."""
