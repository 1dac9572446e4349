"""
Domain errors

Every error carries the message shown to the client. The dispatcher turns
them into `{"succeed": exc.succeed, "error": exc.message}`.
"""


class PaintMapError(Exception):
    """Base class for errors reported in the response envelope"""
    succeed = False
    default_message = "error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidArguments(PaintMapError):
    default_message = "invalid arguments"


class UndefinedFunction(PaintMapError):
    default_message = "undefined function"


class Conflict(PaintMapError):
    def __init__(self, user_name: str):
        self.user_name = user_name
        super().__init__(f"ID {user_name} is already exists")


class AuthFailure(PaintMapError):
    default_message = "Authentication failed"


class Mismatch(PaintMapError):
    default_message = "Authentication mismatch"


class MapNotFound(PaintMapError):
    default_message = "Map not found"


class MapNotExist(PaintMapError):
    # Reported with succeed=True, unlike NotShared. Clients rely on it.
    succeed = True

    def __init__(self, map_id: str):
        self.map_id = map_id
        super().__init__(f"map {map_id} is not exist")


class NotShared(PaintMapError):
    def __init__(self, map_id: str):
        self.map_id = map_id
        super().__init__(f"map {map_id} is not shared")


class ParseError(PaintMapError):
    def __init__(self, reason: str):
        super().__init__(f"invalid map: {reason}")
