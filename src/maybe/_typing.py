__all__ = [
    "Self",
    "TypeAlias",
    "TypeGuard",
    "override",
]

from typing_extensions import Self, TypeAlias, TypeGuard, override
