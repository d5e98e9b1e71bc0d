import pytest
from sqlalchemy.orm import Session

from boardhub.exceptions import ConflictError, NotFoundError
from boardhub.stores import memberships
from boardhub.stores.results import Outcome


def test_add_user_to_board_returns_the_board(db_session: Session, seeded):
    board = memberships.add_user_to_board(db_session, seeded.dsc.id, seeded.board.id)
    assert board.id == seeded.board.id
    assert board.board_name == "testboard"


def test_add_user_to_board_rejects_duplicates(db_session: Session, seeded):
    with pytest.raises(ConflictError):
        memberships.add_user_to_board(db_session, seeded.steve.id, seeded.board.id)


def test_add_user_to_board_requires_both_sides(db_session: Session, seeded):
    with pytest.raises(NotFoundError):
        memberships.add_user_to_board(db_session, 9999, seeded.board.id)
    with pytest.raises(NotFoundError):
        memberships.add_user_to_board(db_session, seeded.steve.id, 9999)


def test_get_boards_by_user_in_join_order(db_session: Session, seeded):
    memberships.add_user_to_board(db_session, seeded.steve.id, seeded.board3.id)
    memberships.add_user_to_board(db_session, seeded.steve.id, seeded.board2.id)

    names = [board.board_name for board in memberships.get_boards_by_user(db_session, seeded.steve.id)]
    assert names == ["testboard", "testboard3", "testboard2"]
    assert memberships.get_boards_by_user(db_session, seeded.dsc.id) == []


def test_get_users_by_board(db_session: Session, seeded):
    memberships.add_user_to_board(db_session, seeded.dsc.id, seeded.board.id)

    handles = [user.github_handle for user in memberships.get_users_by_board(db_session, seeded.board.id)]
    assert handles == ["stevepkuo", "dsc03"]
    assert memberships.get_users_by_board(db_session, seeded.board2.id) == []


def test_membership_listings_require_existing_rows(db_session: Session):
    with pytest.raises(NotFoundError):
        memberships.get_boards_by_user(db_session, 9999)
    with pytest.raises(NotFoundError):
        memberships.get_users_by_board(db_session, 9999)


def test_remove_user_from_board(db_session: Session, seeded):
    assert memberships.remove_user_from_board(db_session, seeded.steve.id, seeded.board.id) is Outcome.SUCCESS
    assert memberships.get_users_by_board(db_session, seeded.board.id) == []
    assert memberships.remove_user_from_board(db_session, seeded.steve.id, seeded.board.id) is Outcome.DELETE_ERROR
