"""Error taxonomy shared by all modules.

Module-specific exceptions subclass these so the API layer can map
whole families of failures to a status code:

- ``NotFound``            -> 404
- ``DuplicateConstraint`` -> 400
- ``ServiceUnavailable``  -> 503

``DuplicateRecord`` is raised by repositories when the storage-level
unique constraint fires; services translate it into the matching
``DuplicateConstraint`` subclass.
"""

from __future__ import annotations


class NotFound(Exception):
    """The requested identifier does not resolve to a live record."""


class DuplicateConstraint(Exception):
    """A uniqueness rule would be violated by the requested write."""


class ServiceUnavailable(Exception):
    """An upstream collaborator could not be reached."""


class DuplicateRecord(Exception):
    """The storage unique index rejected an insert or update."""
