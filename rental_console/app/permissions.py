from __future__ import annotations

import re
from dataclasses import dataclass

from rental_console.app.state import SessionUser

SUPER_ADMIN_ROLE = "super_admin"
FIRM_DASHBOARD_ROUTE = "/[firmId]/dashboard"
_FIRM_DASHBOARD_PATTERN = re.compile(r"^/[^/]+/dashboard$")


@dataclass(frozen=True)
class PageRule:
    roles: frozenset[str] = frozenset()
    permissions: frozenset[str] = frozenset()
    allow_super_admin: bool = False


@dataclass(frozen=True)
class AccessDecision:
    outcome: str
    route: str | None = None
    redirect_to: str | None = None

    @property
    def allowed(self) -> bool:
        return self.outcome == "allow"


PAGE_PERMISSIONS: dict[str, PageRule] = {
    FIRM_DASHBOARD_ROUTE: PageRule(
        roles=frozenset({"super_admin", "user_admin"}),
        permissions=frozenset({"access_admin_dashboard", "access_admin_user_dashboard"}),
        allow_super_admin=True,
    ),
    "/[firmId]/cases": PageRule(permissions=frozenset({"view_cases"}), allow_super_admin=True),
    "/[firmId]/settings": PageRule(roles=frozenset({"admin"}), allow_super_admin=True),
}


def has_role(user: SessionUser | None, role: str) -> bool:
    if user is None:
        return False
    return role in user.roles


def has_permission(user: SessionUser | None, permission: str) -> bool:
    if user is None:
        return False
    if SUPER_ADMIN_ROLE in user.roles:
        return True
    return permission in user.permissions


def is_super_admin(user: SessionUser | None) -> bool:
    return user is not None and SUPER_ADMIN_ROLE in user.roles


def route_path(url: str) -> str:
    return url.split("?", 1)[0].split("#", 1)[0]


def match_route(pathname: str, rules: dict[str, PageRule] | None = None) -> str | None:
    rules = PAGE_PERMISSIONS if rules is None else rules
    if pathname in rules:
        return pathname
    if _FIRM_DASHBOARD_PATTERN.match(pathname):
        return FIRM_DASHBOARD_ROUTE
    return None


def check_page_access(
    user: SessionUser | None, url: str, rules: dict[str, PageRule] | None = None
) -> AccessDecision:
    """Gate a page the way the dashboard middleware does.

    Pages with no rule are open. A rule with roles needs any one of them, a
    rule with permissions needs any one of them, and both apply when set.
    """
    rules = PAGE_PERMISSIONS if rules is None else rules
    route = match_route(route_path(url), rules)
    rule = rules.get(route) if route else None
    if rule is None:
        return AccessDecision("allow")

    if user is None:
        return AccessDecision("login", route, "/login")

    if rule.allow_super_admin and is_super_admin(user):
        return AccessDecision("allow", route)

    if rule.roles and not any(has_role(user, role) for role in rule.roles):
        return AccessDecision("unauthorized", route, "/unauthorized")

    if rule.permissions and not any(has_permission(user, code) for code in rule.permissions):
        return AccessDecision("unauthorized", route, "/unauthorized")

    return AccessDecision("allow", route)


__all__ = [
    "AccessDecision",
    "PAGE_PERMISSIONS",
    "PageRule",
    "check_page_access",
    "has_permission",
    "has_role",
    "is_super_admin",
    "match_route",
]
