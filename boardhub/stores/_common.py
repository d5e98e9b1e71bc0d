"""Helpers shared by the store modules."""
from typing import Any, Iterable, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from boardhub.exceptions import ConflictError, NotFoundError, ValidationError
from boardhub.logger import get_logger

logger = get_logger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def validate_input(schema: Type[SchemaT], data: Union[SchemaT, Mapping[str, Any], None]) -> SchemaT:
    """Coerce a plain mapping into ``schema``, raising ``ValidationError`` on bad input."""
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(dict(data or {}))
    except PydanticValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or schema.__name__}: {error['msg']}"
            for error in exc.errors()
        )
        raise ValidationError(f"Invalid {schema.__name__}: {problems}") from exc


def reject_nulls(update_data: Mapping[str, Any], fields: Iterable[str]) -> None:
    """Refuse patches that would clear a NOT NULL column."""
    cleared = [field for field in fields if field in update_data and update_data[field] is None]
    if cleared:
        raise ValidationError(f"Fields cannot be cleared: {', '.join(cleared)}")


def require(instance: Optional[Any], label: str, key: Any) -> Any:
    if instance is None:
        raise NotFoundError(f"{label} {key!r} not found")
    return instance


def commit_or_conflict(db: Session, message: str) -> None:
    """Commit the session, turning a uniqueness violation into ``ConflictError``."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("%s (%s)", message, exc.orig)
        raise ConflictError(message) from exc
