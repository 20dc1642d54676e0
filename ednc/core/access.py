"""
Access control gate.

Each request is classified independently from its bearer token into one of
three principal kinds. Decisions are pure functions of the principal, the
owner of the resource and the action, nothing is remembered between requests.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ednc.core.config import settings


class PrincipalKind(str, Enum):
    ANONYMOUS = "anonymous"
    INSTRUCTOR = "instructor"
    ADMIN = "admin"


class Action(str, Enum):
    LIST_ALL_COURSES = "list_all_courses"
    UPDATE_COURSE = "update_course"
    DELETE_COURSE = "delete_course"
    VIEW_ROSTER = "view_roster"


@dataclass(frozen=True)
class Principal:
    id: Optional[int] = None
    email: Optional[str] = None
    name: Optional[str] = None
    is_admin: bool = False

    @property
    def kind(self) -> PrincipalKind:
        if self.id is None:
            return PrincipalKind.ANONYMOUS
        return PrincipalKind.ADMIN if self.is_admin else PrincipalKind.INSTRUCTOR

    @property
    def is_authenticated(self) -> bool:
        return self.kind is not PrincipalKind.ANONYMOUS

    @classmethod
    def from_claims(cls, claims: dict) -> "Principal":
        return cls(
            id=int(claims["sub"]),
            email=claims.get("email"),
            name=claims.get("name"),
            is_admin=bool(claims.get("is_admin", False)),
        )


ANONYMOUS = Principal()


def admin_may_override(action: Action) -> bool:
    if action is Action.UPDATE_COURSE:
        return not settings.OWNER_ONLY_COURSE_UPDATE
    return True


def is_allowed(principal: Principal, owner_id: Optional[int], action: Action) -> bool:
    if not principal.is_authenticated:
        return False
    if action is Action.LIST_ALL_COURSES:
        return principal.is_admin
    if owner_id is not None and principal.id == owner_id:
        return True
    return principal.is_admin and admin_may_override(action)
