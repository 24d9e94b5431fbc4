from identity_service.models.enums import Gender
from identity_service.models.user import User

__all__ = [
    "Gender",
    "User",
]
