from typing import Optional

from beanie import PydanticObjectId
from bson import ObjectId

from doctor_portal.shared.exceptions import BadRequestException


def is_object_id(value: Optional[str]) -> bool:
    return bool(value) and ObjectId.is_valid(value)


def parse_object_id(value: Optional[str], message: str) -> PydanticObjectId:
    """Convert a path/body identifier, raising a 400 with ``message`` when malformed."""
    if not is_object_id(value):
        raise BadRequestException(message)
    return PydanticObjectId(value)
