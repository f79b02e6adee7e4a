"""TODO engine.

- core: document cache entries and context snippets
- scanning: marker detection, priority classification, issue-link tokens
- todo_index: the per-document index tying them together
"""

from .todo_index import TodoIndex

__all__ = ["TodoIndex"]
