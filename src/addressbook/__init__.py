"""Address book for students.

This package contains the validated person model, the line-command layer
that filters and edits it, and the JSON storage it is persisted with.
"""

__version__ = "0.1.0"
