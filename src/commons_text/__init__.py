"""
commons_text
============

Does: Root package initializer for the text tokenization, replacement and path-normalization helpers.
Returns: Exposes the subpackages (`token`, `replace`, `path`, `utils`) through a stable namespace.
Used by: All imports starting from `commons_text.*`.
"""

__all__: list[str] = []
__docformat__ = "google"
