"""Board invite endpoints

Sending the invite emails happens elsewhere; the sender reports back through
``/invites/emailed`` so ``/invitees/recent`` only lists invites still waiting
for their first email.
"""
from typing import List, Union

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from boardhub.api.errors import store_errors
from boardhub.database import get_db
from boardhub.schemas import (
    BoardInviteResponse,
    InviteCreate,
    InviteeResponse,
    InviteIdList,
    OutcomeResponse,
    UserResponse,
)
from boardhub.stores import invites as invite_store
from boardhub.stores.results import Outcome

router = APIRouter()


@router.post(
    "/boards/{board_id}/invites",
    response_model=Union[BoardInviteResponse, OutcomeResponse],
    status_code=status.HTTP_201_CREATED,
)
def invite_to_board(board_id: int, invite_in: InviteCreate, db: Session = Depends(get_db)):
    with store_errors():
        if invite_in.github_handle:
            result = invite_store.invite_by_board(db, invite_in.github_handle, board_id)
        else:
            result = invite_store.invite_email_by_board(db, invite_in.email, board_id)
    if isinstance(result, Outcome):
        return OutcomeResponse(result=result.value)
    return result


@router.delete("/boards/{board_id}/invites/{github_handle}", response_model=OutcomeResponse)
def uninvite_from_board(board_id: int, github_handle: str, db: Session = Depends(get_db)):
    with store_errors():
        result = invite_store.uninvite_by_board(db, github_handle, board_id)
    if isinstance(result, Outcome):
        return OutcomeResponse(result=result.value)
    return OutcomeResponse(result=Outcome.SUCCESS.value)


@router.get("/boards/{board_id}/invites", response_model=List[UserResponse])
def list_board_invitees(board_id: int, db: Session = Depends(get_db)):
    with store_errors():
        return invite_store.get_invitees_by_board(db, board_id)


@router.get("/invitees", response_model=List[InviteeResponse])
def list_invitees(db: Session = Depends(get_db)):
    return invite_store.get_invitees(db)


@router.get("/invitees/recent", response_model=List[InviteeResponse])
def list_recently_added(db: Session = Depends(get_db)):
    return invite_store.get_recently_added(db)


@router.post("/invites/emailed", response_model=OutcomeResponse)
def mark_invites_emailed(payload: InviteIdList, db: Session = Depends(get_db)):
    return OutcomeResponse(result=invite_store.emailed_invites(db, payload.ids).value)


@router.post("/invites/delete", response_model=OutcomeResponse)
def delete_invites(payload: InviteIdList, db: Session = Depends(get_db)):
    return OutcomeResponse(result=invite_store.delete_invites(db, payload.ids).value)
