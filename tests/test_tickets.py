from datetime import datetime

import pytest
from sqlalchemy.orm import Session

from boardhub.exceptions import NotFoundError, ValidationError
from boardhub.stores import panels, tickets
from boardhub.stores.results import Outcome


def _ticket(seeded, **overrides):
    fields = {
        "title": "ticket",
        "description": "something to do",
        "status": "todo",
        "priority": 1,
        "type": "bug",
        "creator_id": seeded.steve.id,
        "assignee_handle": "stevepkuo",
        "panel_id": seeded.panel.id,
        "board_id": seeded.board.id,
    }
    fields.update(overrides)
    return fields


def test_create_ticket_then_read_back(db_session: Session, seeded):
    ticket = tickets.get_ticket_by_id(db_session, seeded.ticket.id)
    assert ticket.title == "testticket"
    assert ticket.status == "in progress"
    assert ticket.priority == 2
    assert ticket.type == "feature"
    assert ticket.creator_id == seeded.steve.id
    assert ticket.assignee_handle == "stevepkuo"
    assert isinstance(ticket.created_at, datetime)
    assert isinstance(ticket.updated_at, datetime)


def test_ticket_titles_need_not_be_unique(db_session: Session, seeded):
    first = tickets.create_ticket(db_session, _ticket(seeded, title="same"))
    second = tickets.create_ticket(db_session, _ticket(seeded, title="same"))
    assert first.id != second.id


def test_create_ticket_validation(db_session: Session, seeded):
    missing_status = _ticket(seeded)
    del missing_status["status"]
    with pytest.raises(ValidationError):
        tickets.create_ticket(db_session, missing_status)
    with pytest.raises(ValidationError):
        tickets.create_ticket(db_session, _ticket(seeded, priority="urgent"))


def test_create_ticket_checks_references(db_session: Session, seeded):
    with pytest.raises(NotFoundError):
        tickets.create_ticket(db_session, _ticket(seeded, panel_id=9999))
    with pytest.raises(NotFoundError):
        tickets.create_ticket(db_session, _ticket(seeded, board_id=9999))
    with pytest.raises(NotFoundError):
        tickets.create_ticket(db_session, _ticket(seeded, creator_id=9999))
    with pytest.raises(NotFoundError):
        tickets.create_ticket(db_session, _ticket(seeded, assignee_handle="nobody"))


def test_get_ticket_by_id_missing(db_session: Session):
    with pytest.raises(NotFoundError):
        tickets.get_ticket_by_id(db_session, 9999)


def test_tickets_by_panel_ordered_by_status_then_priority(db_session: Session, seeded):
    tickets.create_ticket(db_session, _ticket(seeded, title="later", status="todo", priority=3))
    tickets.create_ticket(db_session, _ticket(seeded, title="finished", status="done", priority=3))
    tickets.create_ticket(db_session, _ticket(seeded, title="urgent", status="todo", priority=1))

    listed = tickets.get_tickets_by_panel(db_session, seeded.panel.id)
    assert [(t.status, t.priority) for t in listed] == [
        ("done", 3),
        ("in progress", 2),
        ("todo", 1),
        ("todo", 3),
    ]
    assert [t.title for t in listed][-2:] == ["urgent", "later"]


def test_get_tickets_by_panel_errors(db_session: Session, seeded):
    empty = panels.create_panel(db_session, {"name": "empty", "board_id": seeded.board.id})
    assert tickets.get_tickets_by_panel(db_session, empty.id) == []
    with pytest.raises(NotFoundError):
        tickets.get_tickets_by_panel(db_session, 9999)


def test_get_tickets_by_user_uses_assignee(db_session: Session, seeded):
    tickets.create_ticket(db_session, _ticket(seeded, title="for dsc", assignee_handle="dsc03"))

    assert [t.title for t in tickets.get_tickets_by_user(db_session, seeded.steve.id)] == ["testticket"]
    assert [t.title for t in tickets.get_tickets_by_user(db_session, seeded.dsc.id)] == ["for dsc"]
    assert tickets.get_tickets_by_user(db_session, seeded.steve2.id) == []
    with pytest.raises(NotFoundError):
        tickets.get_tickets_by_user(db_session, 9999)


def test_get_tickets_by_user_handle_and_board(db_session: Session, seeded):
    listed = tickets.get_tickets_by_user_handle_and_board(db_session, "stevepkuo", seeded.board.id)
    assert [t.id for t in listed] == [seeded.ticket.id]

    with pytest.raises(NotFoundError):
        tickets.get_tickets_by_user_handle_and_board(db_session, "stevepkuo", seeded.board2.id)
    with pytest.raises(NotFoundError):
        tickets.get_tickets_by_user_handle_and_board(db_session, "dsc03", seeded.board.id)


def test_update_ticket(db_session: Session, seeded):
    ticket = tickets.update_ticket_by_id(
        db_session, seeded.ticket.id, {"status": "done", "assignee_handle": "dsc03"}
    )
    assert ticket.status == "done"
    assert ticket.assignee_handle == "dsc03"
    assert ticket.title == "testticket"
    assert ticket.priority == 2


def test_update_ticket_errors(db_session: Session, seeded):
    with pytest.raises(NotFoundError):
        tickets.update_ticket_by_id(db_session, 9999, {"status": "done"})
    with pytest.raises(NotFoundError):
        tickets.update_ticket_by_id(db_session, seeded.ticket.id, {"panel_id": 9999})
    with pytest.raises(ValidationError):
        tickets.update_ticket_by_id(db_session, seeded.ticket.id, {"priority": None})


def test_delete_ticket(db_session: Session, seeded):
    assert tickets.delete_ticket_by_id(db_session, seeded.ticket.id) is Outcome.SUCCESS
    assert tickets.get_tickets_by_panel(db_session, seeded.panel.id) == []
    assert tickets.delete_ticket_by_id(db_session, seeded.ticket.id) is Outcome.DELETE_ERROR


def test_ticket_panel_must_belong_to_ticket_board(db_session: Session, seeded):
    with pytest.raises(ValidationError):
        tickets.create_ticket(db_session, _ticket(seeded, board_id=seeded.board3.id))
    with pytest.raises(NotFoundError):
        tickets.get_tickets_by_user_handle_and_board(db_session, "stevepkuo", seeded.board3.id)


def test_update_ticket_keeps_panel_and_board_consistent(db_session: Session, seeded):
    other = panels.create_panel(db_session, {"name": "elsewhere", "board_id": seeded.board2.id})

    # one side alone is checked against the stored value of the other
    with pytest.raises(ValidationError):
        tickets.update_ticket_by_id(db_session, seeded.ticket.id, {"board_id": seeded.board2.id})
    with pytest.raises(ValidationError):
        tickets.update_ticket_by_id(db_session, seeded.ticket.id, {"panel_id": other.id})

    moved = tickets.update_ticket_by_id(
        db_session, seeded.ticket.id, {"panel_id": other.id, "board_id": seeded.board2.id}
    )
    assert (moved.panel_id, moved.board_id) == (other.id, seeded.board2.id)
