"""Translation of driver connectivity failures into domain errors."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import InterfaceError, OperationalError

from app.core.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Translate driver connectivity failures into StorageUnavailableError."""
    try:
        yield
    except (OperationalError, InterfaceError, OSError, TimeoutError) as exc:
        logger.error("Storage unavailable during %s: %s", operation, exc)
        raise StorageUnavailableError(f"Storage unavailable during {operation}") from exc
