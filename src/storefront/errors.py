"""Storefront error taxonomy on top of Protean's exceptions.

- Not found: ``protean.exceptions.ObjectNotFoundError``
- Invalid input: ``protean.exceptions.ValidationError``
- Insufficient stock: ``InsufficientStock`` (a ValidationError)

Anything else is unexpected.
"""

from protean.exceptions import ValidationError


class InsufficientStock(ValidationError):
    """A line item asks for more units than the product has in stock."""


def error_message(exc: Exception) -> str:
    """Flatten an exception's messages into the first human-readable line."""
    messages = getattr(exc, "messages", None)
    if isinstance(messages, dict):
        for value in messages.values():
            if isinstance(value, list | tuple):
                if value:
                    return str(value[0])
            elif value:
                return str(value)
    if isinstance(messages, str) and messages:
        return messages
    return str(exc)
