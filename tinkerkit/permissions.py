"""Permission flags, user groups built from them, and users that check them."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Sequence

from tinkerkit.bits import to_binary


class Permission(IntFlag):
    """Single actions; each is a distinct bit."""

    READ = 1
    EDIT = 2
    PUBLISH = 4
    DELETE = 8


class UserGroup(IntEnum):
    """Groups, each a combination of permissions."""

    GUEST = int(Permission.READ)
    EDITOR = GUEST | int(Permission.EDIT)
    MODERATOR = EDITOR | int(Permission.PUBLISH)
    PUBLISHER = MODERATOR & ~int(Permission.EDIT)
    ADMIN = MODERATOR | int(Permission.DELETE)


@dataclass
class User:
    """A named user whose group decides what they may do."""

    name: str
    group: int = 0

    def can(self, action: int) -> bool:
        """Return whether the user's group includes ``action``."""
        return bool(self.group & action)


_PERMISSION_LABELS = (
    ("READ:    ", Permission.READ),
    ("EDIT:    ", Permission.EDIT),
    ("PUBLISH: ", Permission.PUBLISH),
    ("DELETE:  ", Permission.DELETE),
)

_GROUP_LABELS = (
    ("GUESTS CAN:     ", UserGroup.GUEST),
    ("EDITORS CAN:    ", UserGroup.EDITOR),
    ("MODERATORS CAN: ", UserGroup.MODERATOR),
    ("PUBLISHERS CAN: ", UserGroup.PUBLISHER),
    ("ADMINS CAN:     ", UserGroup.ADMIN),
)

_ACTIONS = (
    ("read", Permission.READ),
    ("edit", Permission.EDIT),
    ("publish", Permission.PUBLISH),
    ("delete", Permission.DELETE),
)


def describe_groups() -> list[str]:
    """Return the permissions and groups as labelled 8-bit binary lines."""
    lines = [label + to_binary(int(value)) for label, value in _PERMISSION_LABELS]
    lines.append("")
    lines.extend(label + to_binary(int(value)) for label, value in _GROUP_LABELS)
    lines.append("")
    return lines


def describe_user(user: User) -> list[str]:
    """Return one line per action saying whether ``user`` may do it."""
    return [
        f"{user.name} {'CAN' if user.can(action) else 'CANNOT'} {verb}."
        for verb, action in _ACTIONS
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the permission table and what three sample users can do."""
    argparse.ArgumentParser(description="Show group permissions.").parse_args(argv)
    for line in describe_groups():
        print(line)
    users = [
        User("Fredi", UserGroup.EDITOR),
        User("Mariana", UserGroup.PUBLISHER),
        User("Isabella", UserGroup.ADMIN),
    ]
    for position, user in enumerate(users):
        if position:
            print()
        for line in describe_user(user):
            print(line)
    return 0