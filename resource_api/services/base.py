"""
Resource API - Database Error Translation
===========================================

What:  Maps SQLAlchemy / driver failures to application exceptions.
How:   `translate_db_errors()` wraps the statement(s) of a service method.

Mapping:
    IntegrityError, DataError        → ValidationError (400): the client sent
                                       a missing foreign key, left a NOT NULL
                                       column empty, or a malformed value
    other SQLAlchemyError, OSError   → DatabaseError (500)
    ResourceAPIError                 → re-raised unchanged
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError

from resource_api.exceptions import DatabaseError, ResourceAPIError, ValidationError

logger = logging.getLogger(__name__)


@contextmanager
def translate_db_errors(operation: str, **context: Any) -> Iterator[None]:
    """
    Example:
        with translate_db_errors("create_comment", resource_id=5):
            db.add(comment)
            await db.flush()
    """
    try:
        yield
    except ResourceAPIError:
        raise
    except (IntegrityError, DataError) as e:
        detail = str(getattr(e, "orig", e)).strip().splitlines()
        logger.warning("Rejected %s: %s", operation, detail[0] if detail else type(e).__name__)
        raise ValidationError(
            message=(
                "The request was rejected by the database: a referenced row does not "
                "exist, a required field is missing, or a value has the wrong type."
            ),
            context={"operation": operation, **context},
        )
    except (SQLAlchemyError, OSError) as e:
        logger.error("Database error in %s: %s", operation, str(e), exc_info=True)
        raise DatabaseError(
            context={"operation": operation, "error_type": type(e).__name__, **context},
        )
