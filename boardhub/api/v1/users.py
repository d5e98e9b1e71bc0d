"""User endpoints"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from boardhub.api.errors import store_errors
from boardhub.database import get_db
from boardhub.schemas import (
    BoardResponse,
    InvitedBoard,
    OutcomeResponse,
    TicketResponse,
    UserCreate,
    UserResponse,
    UserUpdate,
)
from boardhub.stores import invites as invite_store
from boardhub.stores import memberships as membership_store
from boardhub.stores import tickets as ticket_store
from boardhub.stores import users as user_store

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(user_in: UserCreate, db: Session = Depends(get_db)):
    with store_errors():
        return user_store.create_user(db, user_in)


@router.get("/{user_id}", response_model=UserResponse)
def read_user(user_id: int, db: Session = Depends(get_db)):
    with store_errors():
        return user_store.get_user_by_id(db, user_id)


@router.patch("/{user_id}", response_model=UserResponse)
def update_user(user_id: int, user_update: UserUpdate, db: Session = Depends(get_db)):
    with store_errors():
        return user_store.update_user_by_id(db, user_id, user_update)


@router.delete("/{user_id}", response_model=OutcomeResponse)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    return OutcomeResponse(result=user_store.delete_user_by_id(db, user_id).value)


@router.get("/{user_id}/boards", response_model=List[BoardResponse])
def list_user_boards(user_id: int, db: Session = Depends(get_db)):
    with store_errors():
        return membership_store.get_boards_by_user(db, user_id)


@router.get("/{user_id}/tickets", response_model=List[TicketResponse])
def list_user_tickets(user_id: int, db: Session = Depends(get_db)):
    with store_errors():
        return ticket_store.get_tickets_by_user(db, user_id)


@router.get("/{user_id}/invites", response_model=List[InvitedBoard])
def list_user_invites(user_id: int, db: Session = Depends(get_db)):
    with store_errors():
        return invite_store.get_invites_by_user(db, user_id)
