import re
import uuid

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")


def new_object_id() -> str:
    """Generate a 24-character hexadecimal record identifier"""
    return uuid.uuid4().hex[:24]


def looks_like_object_id(value: str) -> bool:
    """True when a set reference should be resolved as an id rather than a name"""
    return bool(value) and OBJECT_ID_PATTERN.match(value) is not None
