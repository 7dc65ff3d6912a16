"""monorepo-inspector core package.

Detects JavaScript monorepo roots, the tooling they use, and the member
packages they declare.
"""

from .core import get_monorepo_packages, is_monorepo, is_monorepo_like
from .tech import MONOREPO_LOOKUP, MonorepoTech

__all__ = [
    "MONOREPO_LOOKUP",
    "MonorepoTech",
    "get_monorepo_packages",
    "is_monorepo",
    "is_monorepo_like",
]
