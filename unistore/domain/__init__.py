"""Domain layer: the package-wide exception base.

No dependencies on infrastructure.
"""

from unistore.domain.exceptions import UnistoreException

__all__ = ["UnistoreException"]
