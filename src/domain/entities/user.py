"""User domain entities."""

from dataclasses import dataclass, field, fields, replace
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any
from uuid import uuid4


class Plan(StrEnum):
    """Subscription plans."""

    FREE = "free"
    PRO = "pro"
    PREMIUM = "premium"
    ENTERPRISE = "enterprise"


@dataclass(frozen=True, slots=True)
class PlanInfo:
    """Display data for a plan."""

    id: Plan
    name: str
    price: str


PLAN_CATALOG: tuple[PlanInfo, ...] = (
    PlanInfo(Plan.FREE, "Free", "$0"),
    PlanInfo(Plan.PRO, "Pro", "$20"),
    PlanInfo(Plan.PREMIUM, "Premium", "$45"),
    PlanInfo(Plan.ENTERPRISE, "Enterprise", "Custom"),
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class UserProfile:
    """Public profile of a user. Never carries the password digest."""

    nickname: str
    id: str = field(default_factory=lambda: str(uuid4()))
    email: str | None = None
    phone: str | None = None
    country: str | None = None
    avatar: str | None = None
    plan: Plan = Plan.FREE
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        self.plan = Plan(self.plan)

    @property
    def nickname_key(self) -> str:
        """Case-insensitive comparison key for the nickname."""
        return self.nickname.casefold()

    def merged(self, updates: dict[str, Any]) -> "UserProfile":
        """Return a copy with ``updates`` shallow-merged. ``id`` and ``created_at`` are fixed."""
        changes = {
            k: v
            for k, v in updates.items()
            if k in PROFILE_FIELDS and not (v is None and k in _REQUIRED_FIELDS)
        }
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the field names used by the persisted JSON layout."""
        return {
            "id": self.id,
            "nickname": self.nickname,
            "email": self.email,
            "phone": self.phone,
            "country": self.country,
            "avatar": self.avatar,
            "plan": self.plan.value,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserProfile":
        """Inverse of ``to_dict``. Raises KeyError/ValueError/TypeError on bad input.

        Ids are opaque: older records use non-UUID ids, which are kept as-is.
        """
        user_id = data["id"]
        if isinstance(user_id, bool) or not isinstance(user_id, (str, int)) or user_id == "":
            raise ValueError(f"Invalid user id: {user_id!r}")
        return cls(
            id=str(user_id),
            nickname=str(data["nickname"]),
            email=data.get("email"),
            phone=data.get("phone"),
            country=data.get("country"),
            avatar=data.get("avatar"),
            plan=Plan(data.get("plan") or Plan.FREE),
            created_at=datetime.fromisoformat(data["createdAt"]),
        )


_REQUIRED_FIELDS = frozenset({"nickname", "plan"})

# Mutable profile fields
PROFILE_FIELDS = frozenset(
    f.name for f in fields(UserProfile) if f.name not in {"id", "created_at"}
)


@dataclass
class CredentialEntry:
    """A stored user: public profile plus password digest."""

    user: UserProfile
    password_hash: str

    def to_dict(self) -> dict[str, Any]:
        return {"user": self.user.to_dict(), "passwordHash": self.password_hash}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CredentialEntry":
        return cls(
            user=UserProfile.from_dict(data["user"]),
            password_hash=str(data["passwordHash"]),
        )
