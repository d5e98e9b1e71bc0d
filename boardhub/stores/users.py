"""User and profile store.

Users are keyed by their GitHub handle; profiles and auths hold the data
recorded during OAuth onboarding.
"""
from typing import Any, List, Mapping, Union

from sqlalchemy.orm import Session

from boardhub.exceptions import ConflictError, NotFoundError
from boardhub.logger import get_logger
from boardhub.models import Auth, Profile, User
from boardhub.schemas import (
    AuthCreate,
    AuthResponse,
    ProfileCreate,
    ProfileResponse,
    UserCreate,
    UserPrivate,
    UserResponse,
    UserUpdate,
)
from boardhub.stores._common import commit_or_conflict, reject_nulls, require, validate_input
from boardhub.stores.results import Outcome

logger = get_logger(__name__)


def _user_or_raise(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    return require(user, "User", user_id)


def create_user(db: Session, profile: Union[UserCreate, Mapping[str, Any]]) -> UserResponse:
    user_in = validate_input(UserCreate, profile)
    if handle_exists(db, user_in.github_handle):
        raise ConflictError(f"github_handle {user_in.github_handle!r} already exists")
    if user_in.profile_id is not None:
        require(db.get(Profile, user_in.profile_id), "Profile", user_in.profile_id)

    user = User(**user_in.model_dump())
    db.add(user)
    commit_or_conflict(db, f"github_handle {user_in.github_handle!r} already exists")
    db.refresh(user)
    logger.info("Created user %s (%s)", user.id, user.github_handle)
    return UserResponse.model_validate(user)


def get_user_by_id(db: Session, user_id: int) -> UserResponse:
    return UserResponse.model_validate(_user_or_raise(db, user_id))


def get_user_by_id_unhidden(db: Session, user_id: int) -> UserPrivate:
    return UserPrivate.model_validate(_user_or_raise(db, user_id))


def get_user_by_api_key(db: Session, api_key: str) -> UserPrivate:
    if not api_key:
        # a missing key must not match the users that have none
        raise NotFoundError("User with api key '***' not found")
    user = db.query(User).filter(User.api_key == api_key).first()
    return UserPrivate.model_validate(require(user, "User with api key", "***"))


def get_user_by_handle(db: Session, github_handle: str) -> UserResponse:
    user = db.query(User).filter(User.github_handle == github_handle).first()
    return UserResponse.model_validate(require(user, "User", github_handle))


def get_user_by_email_no_error(db: Session, email: str) -> Union[UserResponse, Outcome]:
    """Look a user up by email, returning ``Outcome.NONEXISTING_USER`` instead of raising."""
    user = db.query(User).filter(User.email == email).order_by(User.id).first()
    if user is None:
        return Outcome.NONEXISTING_USER
    return UserResponse.model_validate(user)


def update_user_by_id(
    db: Session, user_id: int, patch: Union[UserUpdate, Mapping[str, Any]]
) -> UserResponse:
    update_data = validate_input(UserUpdate, patch).model_dump(exclude_unset=True)
    reject_nulls(update_data, ("github_handle", "verified"))
    user = _user_or_raise(db, user_id)
    if update_data.get("profile_id") is not None:
        require(db.get(Profile, update_data["profile_id"]), "Profile", update_data["profile_id"])

    for field, value in update_data.items():
        setattr(user, field, value)

    commit_or_conflict(db, f"Update of user {user_id} conflicts with an existing user")
    db.refresh(user)
    logger.info("Updated user %s: %s", user_id, sorted(update_data))
    return UserResponse.model_validate(user)


def delete_user_by_id(db: Session, user_id: int) -> Outcome:
    """Delete a user and everything cascading from it.

    Returns ``Outcome.DELETE_ERROR`` when no row matched.
    """
    deleted = db.query(User).filter(User.id == user_id).delete()
    db.commit()
    if not deleted:
        logger.info("Delete of user %s matched no rows", user_id)
        return Outcome.DELETE_ERROR
    logger.info("Deleted user %s", user_id)
    return Outcome.SUCCESS


def handle_exists(db: Session, github_handle: str) -> bool:
    return db.query(User.id).filter(User.github_handle == github_handle).first() is not None


def email_exists(db: Session, email: str) -> bool:
    return db.query(User.id).filter(User.email == email).first() is not None


def verified_email(db: Session, email: str) -> bool:
    # "unknown email" and "unverified" are both reported as False
    return (
        db.query(User.id)
        .filter(User.email == email, User.verified.is_(True))
        .first()
        is not None
    )


def create_profile(db: Session, fields: Union[ProfileCreate, Mapping[str, Any]]) -> ProfileResponse:
    profile_in = validate_input(ProfileCreate, fields)
    profile = Profile(**profile_in.model_dump())
    db.add(profile)
    commit_or_conflict(db, f"Profile email {profile_in.email!r} already exists")
    db.refresh(profile)
    logger.info("Created profile %s", profile.id)
    return ProfileResponse.model_validate(profile)


def get_profile_by_id(db: Session, profile_id: int) -> ProfileResponse:
    profile = db.query(Profile).filter(Profile.id == profile_id).first()
    return ProfileResponse.model_validate(require(profile, "Profile", profile_id))


def delete_profile_by_id(db: Session, profile_id: int) -> Outcome:
    """Delete a profile; its auths go with it and linked users are unlinked."""
    deleted = db.query(Profile).filter(Profile.id == profile_id).delete()
    db.commit()
    return Outcome.SUCCESS if deleted else Outcome.DELETE_ERROR


def create_auth(db: Session, fields: Union[AuthCreate, Mapping[str, Any]]) -> AuthResponse:
    auth_in = validate_input(AuthCreate, fields)
    require(db.get(Profile, auth_in.profile_id), "Profile", auth_in.profile_id)

    auth = Auth(**auth_in.model_dump(mode="json"))
    db.add(auth)
    db.commit()
    db.refresh(auth)
    logger.info("Created %s auth %s for profile %s", auth.type, auth.id, auth.profile_id)
    return AuthResponse.model_validate(auth)


def get_auths_by_profile(db: Session, profile_id: int) -> List[AuthResponse]:
    require(db.get(Profile, profile_id), "Profile", profile_id)
    auths = db.query(Auth).filter(Auth.profile_id == profile_id).order_by(Auth.id).all()
    return [AuthResponse.model_validate(auth) for auth in auths]
