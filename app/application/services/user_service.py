"""User service — registration with uniqueness checks, and listing."""

from typing import List

import structlog
from email_validator import EmailNotValidError, validate_email

from app.core.exceptions import ConflictException, ValidationException
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.user import FieldError, UserCreate

logger = structlog.get_logger(__name__)

NAME_MAX_LENGTH = 50


def _check_name(field: str, label: str, value: str) -> FieldError | None:
    if not value:
        return FieldError(field=field, message=f"{label} is required")
    if len(value) > NAME_MAX_LENGTH:
        return FieldError(
            field=field,
            message=f"{label} must be less than {NAME_MAX_LENGTH} characters",
        )
    return None


def _is_valid_email(value: str) -> bool:
    try:
        # Syntax only: reserved names such as .test or .local are fine
        validate_email(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    return True


def validate_user_create(candidate: UserCreate) -> List[FieldError]:
    """Check a candidate record and return every field problem found.

    An empty list means the candidate may be handed to ``register_user``.
    Phone and company are free-form and never produce errors.
    """
    errors: List[FieldError] = []

    for field, label, value in (
        ("firstName", "First name", candidate.first_name),
        ("lastName", "Last name", candidate.last_name),
    ):
        error = _check_name(field, label, value)
        if error:
            errors.append(error)

    if not _is_valid_email(candidate.email):
        errors.append(FieldError(field="email", message="Please enter a valid email address"))

    return errors


def ensure_valid(candidate: UserCreate) -> None:
    """Raise ValidationException if the candidate has any field errors."""
    errors = validate_user_create(candidate)
    if errors:
        raise ValidationException([e.model_dump() for e in errors])


def register_user(repo: UserRepository, candidate: UserCreate) -> User:
    """Persist a new user after checking email, then phone, for conflicts.

    Raises ConflictException without writing anything when either is taken.
    The phone lookup is skipped entirely when no phone was supplied.
    """
    if repo.find_by_email(candidate.email):
        logger.info("User registration rejected", reason="email_conflict")
        raise ConflictException()

    if candidate.phone:
        if repo.find_by_phone(candidate.phone):
            logger.info("User registration rejected", reason="phone_conflict")
            raise ConflictException()

    user = repo.insert(candidate.model_dump())
    logger.info("User registered", user_id=user.id)
    return user


def list_users(repo: UserRepository) -> List[User]:
    """Get all users, most recently created first."""
    return repo.list_all_ordered_by_created_at_desc()
