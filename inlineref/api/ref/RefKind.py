"""Reference record kinds."""

from enum import Enum


class RefKind(str, Enum):
    LINK = "link"
    IMAGE = "image"
