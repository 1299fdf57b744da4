"""Emitter error base class."""


class EmitterError(Exception):

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

"""Raised for a missing or malformed argument (event name, callback, mixin target)."""
class InvalidArgument(EmitterError, ValueError):
    def __init__(self, message: str = "Invalid argument"):
        super().__init__(message)
