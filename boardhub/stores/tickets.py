"""Ticket store.

Ticket listings are ordered by status (lexically), then by priority with the
most urgent (lowest number) first.
"""
from typing import Any, Dict, List, Mapping, Optional, Union

from sqlalchemy.orm import Query, Session

from boardhub.exceptions import ValidationError
from boardhub.logger import get_logger
from boardhub.models import Board, Panel, Ticket, User
from boardhub.schemas import TicketCreate, TicketResponse, TicketUpdate
from boardhub.stores._common import reject_nulls, require, validate_input
from boardhub.stores.results import Outcome

logger = get_logger(__name__)

REQUIRED_FIELDS = ("title", "status", "priority", "panel_id", "board_id")


def _ordered(query: Query) -> Query:
    return query.order_by(Ticket.status.asc(), Ticket.priority.asc(), Ticket.id.asc())


def _check_references(db: Session, data: Dict[str, Any], ticket: Optional[Ticket] = None) -> None:
    """Check the rows a ticket points at. On update, ``ticket`` supplies the fields left unchanged."""
    if "panel_id" in data or "board_id" in data:
        panel_id = data.get("panel_id", ticket.panel_id if ticket else None)
        board_id = data.get("board_id", ticket.board_id if ticket else None)
        panel = require(db.get(Panel, panel_id), "Panel", panel_id)
        require(db.get(Board, board_id), "Board", board_id)
        if panel.board_id != board_id:
            raise ValidationError(f"Panel {panel_id} belongs to board {panel.board_id}, not board {board_id}")
    if data.get("creator_id") is not None:
        require(db.get(User, data["creator_id"]), "User", data["creator_id"])
    if data.get("assignee_handle") is not None:
        assignee = db.query(User.id).filter(User.github_handle == data["assignee_handle"]).first()
        require(assignee, "User", data["assignee_handle"])


def create_ticket(db: Session, fields: Union[TicketCreate, Mapping[str, Any]]) -> TicketResponse:
    data = validate_input(TicketCreate, fields).model_dump()
    _check_references(db, data)

    ticket = Ticket(**data)
    db.add(ticket)
    db.commit()
    db.refresh(ticket)
    logger.info("Created ticket %s on panel %s", ticket.id, ticket.panel_id)
    return TicketResponse.model_validate(ticket)


def get_ticket_by_id(db: Session, ticket_id: int) -> TicketResponse:
    ticket = db.query(Ticket).filter(Ticket.id == ticket_id).first()
    return TicketResponse.model_validate(require(ticket, "Ticket", ticket_id))


def update_ticket_by_id(
    db: Session, ticket_id: int, patch: Union[TicketUpdate, Mapping[str, Any]]
) -> TicketResponse:
    update_data = validate_input(TicketUpdate, patch).model_dump(exclude_unset=True)
    reject_nulls(update_data, REQUIRED_FIELDS)
    ticket = require(db.query(Ticket).filter(Ticket.id == ticket_id).first(), "Ticket", ticket_id)
    _check_references(db, update_data, ticket)

    for field, value in update_data.items():
        setattr(ticket, field, value)

    db.commit()
    db.refresh(ticket)
    logger.info("Updated ticket %s: %s", ticket_id, sorted(update_data))
    return TicketResponse.model_validate(ticket)


def delete_ticket_by_id(db: Session, ticket_id: int) -> Outcome:
    deleted = db.query(Ticket).filter(Ticket.id == ticket_id).delete()
    db.commit()
    return Outcome.SUCCESS if deleted else Outcome.DELETE_ERROR


def get_tickets_by_user(db: Session, user_id: int) -> List[TicketResponse]:
    """Tickets assigned to a user."""
    user = require(db.get(User, user_id), "User", user_id)
    tickets = _ordered(db.query(Ticket).filter(Ticket.assignee_handle == user.github_handle)).all()
    return [TicketResponse.model_validate(ticket) for ticket in tickets]


def get_tickets_by_panel(db: Session, panel_id: int) -> List[TicketResponse]:
    require(db.get(Panel, panel_id), "Panel", panel_id)
    tickets = _ordered(db.query(Ticket).filter(Ticket.panel_id == panel_id)).all()
    return [TicketResponse.model_validate(ticket) for ticket in tickets]


def get_tickets_by_user_handle_and_board(
    db: Session, github_handle: str, board_id: int
) -> List[TicketResponse]:
    """Tickets assigned to ``github_handle`` on one board.

    Raises ``NotFoundError`` when the pair has no tickets at all, which also
    covers an unknown handle or board.
    """
    tickets = _ordered(
        db.query(Ticket).filter(
            Ticket.assignee_handle == github_handle,
            Ticket.board_id == board_id,
        )
    ).all()
    require(tickets or None, "Tickets for", (github_handle, board_id))
    return [TicketResponse.model_validate(ticket) for ticket in tickets]
