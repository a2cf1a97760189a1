"""Messages, solver side and driving side of the solver process protocol."""

__all__ = ["messages", "child", "parent"]