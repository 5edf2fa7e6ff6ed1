class GostError(Exception):
    """
    Base class for errors that abort a run
    """


class SourceOpenError(GostError):
    def __init__(self, path, reason=None):
        self.path = path
        message = f"cannot open {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class InvalidTokenError(GostError):
    def __init__(self, token):
        self.token = token
        super().__init__(f"invalid input {token}")


class EmptyInputError(GostError):
    def __init__(self):
        super().__init__("no numbers given")
