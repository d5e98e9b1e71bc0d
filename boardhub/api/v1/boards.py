"""Board endpoints"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from boardhub.api.errors import store_errors
from boardhub.database import get_db
from boardhub.schemas import (
    BoardCreate,
    BoardResponse,
    BoardUpdate,
    OutcomeResponse,
    PanelResponse,
    TicketResponse,
    UserResponse,
)
from boardhub.stores import boards as board_store
from boardhub.stores import memberships as membership_store
from boardhub.stores import panels as panel_store
from boardhub.stores import tickets as ticket_store

router = APIRouter()


@router.post("", response_model=BoardResponse, status_code=status.HTTP_201_CREATED)
def create_board(board_in: BoardCreate, db: Session = Depends(get_db)):
    with store_errors():
        board = board_store.create_board(db, board_in)
        # the owner is always a member of their board
        membership_store.add_user_to_board(db, board.owner_id, board.id)
        return board


@router.get("/by-repo", response_model=BoardResponse)
def read_board_by_repo(repo_url: str, db: Session = Depends(get_db)):
    with store_errors():
        return board_store.get_board_by_repo_url(db, repo_url)


@router.get("/{board_id}", response_model=BoardResponse)
def read_board(board_id: int, db: Session = Depends(get_db)):
    with store_errors():
        return board_store.get_board_by_id(db, board_id)


@router.patch("/{board_id}", response_model=BoardResponse)
def update_board(board_id: int, board_update: BoardUpdate, db: Session = Depends(get_db)):
    with store_errors():
        return board_store.update_board_by_id(db, board_id, board_update)


@router.delete("/{board_id}", response_model=OutcomeResponse)
def delete_board(board_id: int, db: Session = Depends(get_db)):
    return OutcomeResponse(result=board_store.delete_board_by_id(db, board_id).value)


@router.get("/{board_id}/members", response_model=List[UserResponse])
def list_board_members(board_id: int, db: Session = Depends(get_db)):
    with store_errors():
        return membership_store.get_users_by_board(db, board_id)


@router.post("/{board_id}/members/{user_id}", response_model=BoardResponse, status_code=status.HTTP_201_CREATED)
def add_board_member(board_id: int, user_id: int, db: Session = Depends(get_db)):
    with store_errors():
        return membership_store.add_user_to_board(db, user_id, board_id)


@router.delete("/{board_id}/members/{user_id}", response_model=OutcomeResponse)
def remove_board_member(board_id: int, user_id: int, db: Session = Depends(get_db)):
    return OutcomeResponse(result=membership_store.remove_user_from_board(db, user_id, board_id).value)


@router.get("/{board_id}/panels", response_model=List[PanelResponse])
def list_board_panels(board_id: int, db: Session = Depends(get_db)):
    with store_errors():
        return panel_store.get_panels_by_board(db, board_id)


@router.get("/{board_id}/tickets/{github_handle}", response_model=List[TicketResponse])
def list_board_tickets_for_user(board_id: int, github_handle: str, db: Session = Depends(get_db)):
    with store_errors():
        return ticket_store.get_tickets_by_user_handle_and_board(db, github_handle, board_id)
