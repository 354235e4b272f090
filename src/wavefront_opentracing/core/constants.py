from __future__ import annotations

from enum import StrEnum


class ReferenceType(StrEnum):
    CHILD_OF = "child_of"
    FOLLOWS_FROM = "follows_from"


# Well-known tag keys
APPLICATION_TAG_KEY = "application"
SERVICE_TAG_KEY = "service"
ERROR_TAG_KEY = "error"
