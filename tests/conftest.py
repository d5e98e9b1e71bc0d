from types import SimpleNamespace

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from boardhub.database import enable_sqlite_foreign_keys
from boardhub.migrations import reset
from boardhub.stores import boards, memberships, panels, tickets, users

TEST_DATABASE_URL = "sqlite://"
engine = enable_sqlite_foreign_keys(
    create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def test_engine():
    return engine


@pytest.fixture(autouse=True)
def db_session() -> Session:
    reset(engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded(db_session: Session) -> SimpleNamespace:
    """Three users, three boards, one membership, one panel and one ticket."""
    steve = users.create_user(
        db_session,
        {
            "github_handle": "stevepkuo",
            "email": "blah@aol.com",
            "profile_photo": "https://avatars0.githubusercontent.com/u/14355395?v=4",
            "oauth_id": "14355395",
            "api_key": "fish",
        },
    )
    dsc = users.create_user(db_session, {"github_handle": "dsc03", "email": "dsc03@aol.com"})
    steve2 = users.create_user(db_session, {"github_handle": "stevepkuo2", "email": "stevepkuo2@aol.com"})

    board = boards.create_board(
        db_session,
        {
            "board_name": "testboard",
            "repo_name": "thesis",
            "repo_url": "https://github.com/Benevolent-Roosters/thesis",
            "owner_id": steve.id,
        },
    )
    board2 = boards.create_board(db_session, {"board_name": "testboard2", "owner_id": steve.id})
    board3 = boards.create_board(db_session, {"board_name": "testboard3", "owner_id": steve2.id})
    memberships.add_user_to_board(db_session, steve.id, board.id)

    panel = panels.create_panel(db_session, {"name": "testpanel", "board_id": board.id})
    ticket = tickets.create_ticket(
        db_session,
        {
            "title": "testticket",
            "status": "in progress",
            "priority": 2,
            "type": "feature",
            "creator_id": steve.id,
            "assignee_handle": "stevepkuo",
            "panel_id": panel.id,
            "board_id": board.id,
        },
    )
    return SimpleNamespace(
        steve=steve,
        dsc=dsc,
        steve2=steve2,
        board=board,
        board2=board2,
        board3=board3,
        panel=panel,
        ticket=ticket,
    )
