"""User and group name lookup for the ownership columns."""

from __future__ import annotations

import grp
import os
import pwd
from functools import lru_cache


@lru_cache(maxsize=256)
def user_name(uid: int) -> str | None:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return None


@lru_cache(maxsize=256)
def group_name(gid: int) -> str | None:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return None


class UserNames:
    """Resolves ids to names and knows which ids belong to the caller.

    Unknown ids resolve to ``None`` so the renderer can fall back to the
    number.
    """

    def __init__(self, current_uid: int | None = None, current_groups: frozenset[int] | None = None) -> None:
        self.current_uid = os.getuid() if current_uid is None else current_uid
        if current_groups is None:
            current_groups = frozenset((os.getgid(), *os.getgroups()))
        self.current_groups = current_groups

    def user_name(self, uid: int) -> str | None:
        return user_name(uid)

    def group_name(self, gid: int) -> str | None:
        return group_name(gid)

    def is_current_user(self, uid: int) -> bool:
        return uid == self.current_uid

    def is_current_group(self, gid: int) -> bool:
        return gid in self.current_groups


__all__ = ["UserNames", "user_name", "group_name"]
