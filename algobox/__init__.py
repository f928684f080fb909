"""Classic algorithms and data structures: sorting, searching, dynamic
programming, arithmetic, string matching, stacks, queues, linked lists and
search trees."""

__version__ = "0.1.0"