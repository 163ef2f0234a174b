class KeyEventFormatError(ValueError):
    pass


class MalformedNotation(KeyEventFormatError):
    def __init__(self, message: str, notation: str):
        super().__init__(message)
        self.notation = notation


class UnknownKeysym(KeyEventFormatError):
    def __init__(self, token: str):
        super().__init__(f"unknown keyval {token}")
        self.token = token
