from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional
from fastapi import Header
from app.core.config import USER_ID_HEADER, USER_EMAILS_HEADER
from app.core.errors import Unauthenticated


def normalize_email(email: str) -> str:
    return email.strip().lower()


def normalize_emails(emails: Iterable[str]) -> list:
    """Strips, lower-cases and de-duplicates emails, keeping first-seen order."""
    seen = []
    for email in emails:
        value = normalize_email(email)
        if value and value not in seen:
            seen.append(value)
    return seen


@dataclass(frozen=True)
class Identity:
    """A verified caller: the identity provider's user id plus its verified emails."""
    user_id: str
    emails: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def build(cls, user_id: str, emails: Iterable[str] = ()) -> "Identity":
        return cls(user_id=user_id, emails=frozenset(normalize_emails(emails)))


async def get_current_identity(
    user_id: Optional[str] = Header(None, alias=USER_ID_HEADER),
    user_emails: Optional[str] = Header(None, alias=USER_EMAILS_HEADER),
) -> Identity:
    """
    FastAPI dependency resolving the caller from the headers set by the
    authenticating gateway. Requests without a user id are rejected.
    """
    if not user_id or not user_id.strip():
        raise Unauthenticated("Unauthorized")
    emails = user_emails.split(",") if user_emails else []
    return Identity.build(user_id.strip(), emails)
