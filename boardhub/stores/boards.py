"""Board store."""
from typing import Any, Mapping, Union

from sqlalchemy.orm import Session

from boardhub.exceptions import ConflictError
from boardhub.logger import get_logger
from boardhub.models import Board, User
from boardhub.schemas import BoardCreate, BoardResponse, BoardUpdate
from boardhub.stores._common import commit_or_conflict, reject_nulls, require, validate_input
from boardhub.stores.results import Outcome

logger = get_logger(__name__)


def board_or_raise(db: Session, board_id: int) -> Board:
    board = db.query(Board).filter(Board.id == board_id).first()
    return require(board, "Board", board_id)


def _ensure_name_free(db: Session, board_name: str, board_id: int = None) -> None:
    query = db.query(Board.id).filter(Board.board_name == board_name)
    if board_id is not None:
        query = query.filter(Board.id != board_id)
    if query.first() is not None:
        raise ConflictError(f"Board name {board_name!r} already exists")


def create_board(db: Session, fields: Union[BoardCreate, Mapping[str, Any]]) -> BoardResponse:
    board_in = validate_input(BoardCreate, fields)
    _ensure_name_free(db, board_in.board_name)
    require(db.get(User, board_in.owner_id), "User", board_in.owner_id)

    board = Board(**board_in.model_dump())
    db.add(board)
    commit_or_conflict(db, f"Board name {board_in.board_name!r} already exists")
    db.refresh(board)
    logger.info("Created board %s (%s) for owner %s", board.id, board.board_name, board.owner_id)
    return BoardResponse.model_validate(board)


def get_board_by_id(db: Session, board_id: int) -> BoardResponse:
    return BoardResponse.model_validate(board_or_raise(db, board_id))


def get_board_by_repo_url(db: Session, repo_url: str) -> BoardResponse:
    board = db.query(Board).filter(Board.repo_url == repo_url).order_by(Board.id).first()
    return BoardResponse.model_validate(require(board, "Board for repo", repo_url))


def update_board_by_id(
    db: Session, board_id: int, patch: Union[BoardUpdate, Mapping[str, Any]]
) -> BoardResponse:
    update_data = validate_input(BoardUpdate, patch).model_dump(exclude_unset=True)
    reject_nulls(update_data, ("board_name", "owner_id"))
    board = board_or_raise(db, board_id)
    if "board_name" in update_data:
        _ensure_name_free(db, update_data["board_name"], board_id)
    if "owner_id" in update_data:
        require(db.get(User, update_data["owner_id"]), "User", update_data["owner_id"])

    for field, value in update_data.items():
        setattr(board, field, value)

    commit_or_conflict(db, f"Update of board {board_id} conflicts with an existing board")
    db.refresh(board)
    logger.info("Updated board %s: %s", board_id, sorted(update_data))
    return BoardResponse.model_validate(board)


def delete_board_by_id(db: Session, board_id: int) -> Outcome:
    """Delete a board with its panels, tickets, memberships and invites."""
    deleted = db.query(Board).filter(Board.id == board_id).delete()
    db.commit()
    if not deleted:
        return Outcome.DELETE_ERROR
    logger.info("Deleted board %s", board_id)
    return Outcome.SUCCESS
