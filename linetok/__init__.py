"""
linetok
=======
Line-scoped token finder: pick the Nth number, email, IP address, date, …
out of the current line and copy it into a kill-ring-like store.
"""

__version__ = "1.0.0"

# Lazy import to avoid circular dependencies
def __getattr__(name):
    if name == "TokenFinder":
        from linetok.finder import TokenFinder
        return TokenFinder
    if name == "ANY":
        from linetok.core.data_types import ANY
        return ANY
    raise AttributeError(f"module 'linetok' has no attribute {name!r}")


__all__ = [
    "__version__",
    "TokenFinder",
    "ANY",
]
