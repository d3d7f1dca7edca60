"""Standard-output adapter."""

from .default import ACTIVE_WRITER, ConsoleWriter, bound_writer, current_writer, emit

__all__ = ["ACTIVE_WRITER", "ConsoleWriter", "bound_writer", "current_writer", "emit"]
