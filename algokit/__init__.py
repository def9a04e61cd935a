"""Classic algorithms and data structures: sorts, searches, trees, lists, stacks, queues, scheduling, puzzles and small exercises."""

__version__ = "0.1.0"