"""Error kinds raised by the alias registry.

Every failure surfaces as an ``OperationFailed``. Each layer re-raises an
``OperationFailed`` unchanged and wraps anything foreign with its own message,
so the text gains context as the stack unwinds.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager


class OperationFailed(Exception):
    """Base error for every registry operation."""


class DecodeError(OperationFailed):
    """Registry bytes are malformed or truncated."""


class NotFound(OperationFailed):
    """An accession names an alias or group that does not exist."""


class InvalidArgument(OperationFailed):
    """Bad accession, name, edit action, or an overfull group."""


class RegistryIOError(OperationFailed):
    """The registry file could not be written."""


@contextmanager
def reclassify(kind: type[OperationFailed], message: str) -> Iterator[None]:
    """Wrap foreign exceptions raised in the block as ``kind(message)``."""
    try:
        yield
    except OperationFailed:
        raise
    except Exception as exc:
        raise kind(f"{message}: {exc}" if str(exc) else message) from exc

