"""Membership store: which users belong to which boards."""
from typing import List

from sqlalchemy.orm import Session

from boardhub.exceptions import ConflictError
from boardhub.logger import get_logger
from boardhub.models import Board, BoardUser, User
from boardhub.schemas import BoardResponse, UserResponse
from boardhub.stores._common import commit_or_conflict, require
from boardhub.stores.results import Outcome

logger = get_logger(__name__)


def add_user_to_board(db: Session, user_id: int, board_id: int) -> BoardResponse:
    require(db.get(User, user_id), "User", user_id)
    board = require(db.get(Board, board_id), "Board", board_id)

    existing = (
        db.query(BoardUser.id)
        .filter(BoardUser.user_id == user_id, BoardUser.board_id == board_id)
        .first()
    )
    if existing is not None:
        raise ConflictError(f"User {user_id} already belongs to board {board_id}")

    db.add(BoardUser(user_id=user_id, board_id=board_id))
    commit_or_conflict(db, f"User {user_id} already belongs to board {board_id}")
    db.refresh(board)
    logger.info("Added user %s to board %s", user_id, board_id)
    return BoardResponse.model_validate(board)


def remove_user_from_board(db: Session, user_id: int, board_id: int) -> Outcome:
    deleted = (
        db.query(BoardUser)
        .filter(BoardUser.user_id == user_id, BoardUser.board_id == board_id)
        .delete()
    )
    db.commit()
    if not deleted:
        return Outcome.DELETE_ERROR
    logger.info("Removed user %s from board %s", user_id, board_id)
    return Outcome.SUCCESS


def get_boards_by_user(db: Session, user_id: int) -> List[BoardResponse]:
    require(db.get(User, user_id), "User", user_id)
    boards = (
        db.query(Board)
        .join(BoardUser, BoardUser.board_id == Board.id)
        .filter(BoardUser.user_id == user_id)
        .order_by(BoardUser.id)
        .all()
    )
    return [BoardResponse.model_validate(board) for board in boards]


def get_users_by_board(db: Session, board_id: int) -> List[UserResponse]:
    require(db.get(Board, board_id), "Board", board_id)
    users = (
        db.query(User)
        .join(BoardUser, BoardUser.user_id == User.id)
        .filter(BoardUser.board_id == board_id)
        .order_by(BoardUser.id)
        .all()
    )
    return [UserResponse.model_validate(user) for user in users]
