"""Domain-specific exceptions for rooms services."""


class RoomsServiceError(Exception):
    """Base exception for rooms services."""
    pass


class RoomNotFoundError(RoomsServiceError):
    """Raised when room does not exist."""
    pass


class DuplicateRoomNumberError(RoomsServiceError):
    """Raised when another room already uses the room number."""
    pass


class RoomHasOrdersError(RoomsServiceError):
    """Raised when deleting a room that orders were placed from."""
    pass


class InvalidRoomStatusError(RoomsServiceError):
    """Raised when a status outside RoomStatus is requested."""
    pass
