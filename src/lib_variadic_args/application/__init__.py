"""Application layer: output port and the overload registry."""
