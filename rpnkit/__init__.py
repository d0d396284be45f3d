"""Basic containers and an infix to reverse Polish notation converter."""

__version__ = "0.1.0"
__all__ = ["array", "linkedlist", "stack", "queue", "vector", "rpn", "practice"]