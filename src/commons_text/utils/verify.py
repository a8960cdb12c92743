# commons_text/utils/verify.py
"""
verify.py.

Does: Precondition checks that fail loudly with a formatted message.
Returns: verify() -> None, not_none() -> the checked reference, format_message() -> str.
Used by: join index checks, replace_each list checks, path helpers.
"""
from __future__ import annotations

from typing import Any, TypeVar

__all__ = [
    "PreconditionViolation",
    "verify",
    "not_none",
    "format_message",
]

T = TypeVar("T")


class PreconditionViolation(ValueError):
    """Raise when a caller breaks a documented precondition (programmer error)."""


def format_message(template: object, *args: Any) -> str:
    """
    Does: Substitute each '%s' in `template` with the next positional arg.
          Surplus args are appended as ' [a, b]'; surplus placeholders stay as-is.
    Returns: The formatted message. A None template renders as 'None'.
    """
    template = str(template)
    parts: list[str] = []
    template_start = 0
    i = 0
    while i < len(args):
        placeholder = template.find("%s", template_start)
        if placeholder == -1:
            break
        parts.append(template[template_start:placeholder])
        parts.append(str(args[i]))
        i += 1
        template_start = placeholder + 2
    parts.append(template[template_start:])

    if i < len(args):
        parts.append(" [")
        parts.append(", ".join(str(a) for a in args[i:]))
        parts.append("]")
    return "".join(parts)


def verify(expression: bool, template: object = None, *args: Any) -> None:
    """Does: Raise PreconditionViolation with a formatted message when `expression` is false."""
    if not expression:
        if template is None and not args:
            raise PreconditionViolation()
        raise PreconditionViolation(format_message(template, *args))


def not_none(reference: T | None, template: object = "expected a non-None reference", *args: Any) -> T:
    """
    Does: Ensure `reference` is not None.
    Returns: The reference itself, for inline use.
    """
    if reference is None:
        raise PreconditionViolation(format_message(template, *args))
    return reference
