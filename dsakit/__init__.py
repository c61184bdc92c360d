"""Classic data structures and algorithms: arrays, matrices, recursion, lists, queues and stacks."""

__version__ = "0.1.0"
__all__ = ["arrays", "grid", "recursion", "linked_list", "queues", "stacks", "demo"]