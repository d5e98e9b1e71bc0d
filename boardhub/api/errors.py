"""Translation of store errors into HTTP responses."""
from contextlib import contextmanager

from fastapi import HTTPException, status

from boardhub.exceptions import ConflictError, NotFoundError, ValidationError


@contextmanager
def store_errors():
    try:
        yield
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message) from exc
    except ConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=exc.message) from exc
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=exc.message) from exc
