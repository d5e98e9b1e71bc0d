"""Invitation store.

An invite pairs a GitHub handle with a board. It is pending from creation
until it is withdrawn or deleted; ``last_email`` records when the invite email
was last sent and stays ``None`` until then.
"""
from typing import Dict, Iterable, List, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.sql import func

from boardhub.logger import get_logger
from boardhub.models import Board, BoardInvite, User
from boardhub.schemas import (
    BoardInviteResponse,
    BoardResponse,
    InvitedBoard,
    InviteeResponse,
    UserResponse,
)
from boardhub.stores._common import require
from boardhub.stores.results import Outcome

logger = get_logger(__name__)


def _user_by_handle(db: Session, github_handle: str) -> User:
    user = db.query(User).filter(User.github_handle == github_handle).first()
    return require(user, "User", github_handle)


def _invited_board(invite: BoardInvite) -> InvitedBoard:
    board = BoardResponse.model_validate(invite.board)
    return InvitedBoard(**board.model_dump(), invite_id=invite.id, last_email=invite.last_email)


def _invite_exists(db: Session, github_handle: str, board_id: int) -> bool:
    return (
        db.query(BoardInvite.id)
        .filter(BoardInvite.invitee_handle == github_handle, BoardInvite.board_id == board_id)
        .first()
        is not None
    )


def _create_invite(db: Session, user: User, board_id: int) -> Union[BoardInviteResponse, Outcome]:
    require(db.get(Board, board_id), "Board", board_id)
    github_handle = user.github_handle
    if _invite_exists(db, github_handle, board_id):
        return Outcome.DUPLICATE_INVITE

    invite = BoardInvite(invitee_handle=github_handle, board_id=board_id)
    db.add(invite)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        # a concurrent invite for the same pair won the race
        if _invite_exists(db, github_handle, board_id):
            return Outcome.DUPLICATE_INVITE
        # or the board went away after it was checked
        require(db.get(Board, board_id), "Board", board_id)
        raise
    db.refresh(invite)
    logger.info("Invited %s to board %s", invite.invitee_handle, board_id)
    return BoardInviteResponse.model_validate(invite)


def invite_by_board(db: Session, github_handle: str, board_id: int) -> Union[BoardInviteResponse, Outcome]:
    return _create_invite(db, _user_by_handle(db, github_handle), board_id)


def invite_email_by_board(db: Session, email: str, board_id: int) -> Union[BoardInviteResponse, Outcome]:
    user = db.query(User).filter(User.email == email).order_by(User.id).first()
    return _create_invite(db, require(user, "User with email", email), board_id)


def uninvite_by_board(db: Session, github_handle: str, board_id: int) -> Union[List, Outcome]:
    """Withdraw an invite. Returns an empty list once the invite is gone."""
    user = _user_by_handle(db, github_handle)
    deleted = (
        db.query(BoardInvite)
        .filter(BoardInvite.invitee_handle == user.github_handle, BoardInvite.board_id == board_id)
        .delete()
    )
    db.commit()
    if not deleted:
        return Outcome.NOT_INVITED
    logger.info("Uninvited %s from board %s", github_handle, board_id)
    return []


def get_invitees_by_board(db: Session, board_id: int) -> List[UserResponse]:
    require(db.get(Board, board_id), "Board", board_id)
    users = (
        db.query(User)
        .join(BoardInvite, BoardInvite.invitee_handle == User.github_handle)
        .filter(BoardInvite.board_id == board_id)
        .order_by(BoardInvite.id)
        .all()
    )
    return [UserResponse.model_validate(user) for user in users]


def _group_by_invitee(invites: Iterable[BoardInvite]) -> List[InviteeResponse]:
    grouped: Dict[int, InviteeResponse] = {}
    for invite in invites:
        entry = grouped.get(invite.invitee.id)
        if entry is None:
            user = UserResponse.model_validate(invite.invitee)
            entry = grouped[invite.invitee.id] = InviteeResponse(**user.model_dump())
        entry.invited_to_boards.append(_invited_board(invite))
    # dicts keep insertion order, so users appear in order of their first invite
    return list(grouped.values())


def _pending_invites(db: Session):
    return (
        db.query(BoardInvite)
        .options(joinedload(BoardInvite.invitee), joinedload(BoardInvite.board))
        .order_by(BoardInvite.id)
    )


def get_invitees(db: Session) -> List[InviteeResponse]:
    """Every invited user with the boards they are invited to."""
    return _group_by_invitee(_pending_invites(db).all())


def get_recently_added(db: Session) -> List[InviteeResponse]:
    """Like ``get_invitees`` but only invites that have not been emailed yet."""
    return _group_by_invitee(_pending_invites(db).filter(BoardInvite.last_email.is_(None)).all())


def get_invites_by_user(db: Session, user_id: int) -> List[InvitedBoard]:
    user = require(db.get(User, user_id), "User", user_id)
    invites = (
        db.query(BoardInvite)
        .options(joinedload(BoardInvite.board))
        .filter(BoardInvite.invitee_handle == user.github_handle)
        .order_by(BoardInvite.id)
        .all()
    )
    return [_invited_board(invite) for invite in invites]


def emailed_invites(db: Session, invite_ids: Iterable[int]) -> Outcome:
    """Stamp ``last_email`` on the given invites. Unknown ids are skipped."""
    ids = list(invite_ids)
    if not ids:
        return Outcome.EMPTY
    updated = (
        db.query(BoardInvite)
        .filter(BoardInvite.id.in_(ids))
        .update({BoardInvite.last_email: func.now()}, synchronize_session=False)
    )
    db.commit()
    if not updated:
        return Outcome.EMPTY
    logger.info("Marked %s invite(s) as emailed", updated)
    return Outcome.SUCCESS


def delete_invites(db: Session, invite_ids: Iterable[int]) -> Outcome:
    """Delete the given invites. Unknown ids are skipped."""
    ids = list(invite_ids)
    if not ids:
        return Outcome.EMPTY
    deleted = db.query(BoardInvite).filter(BoardInvite.id.in_(ids)).delete(synchronize_session=False)
    db.commit()
    if not deleted:
        return Outcome.EMPTY
    logger.info("Deleted %s invite(s)", deleted)
    return Outcome.SUCCESS
