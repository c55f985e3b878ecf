class MenuError(Exception):
    """Base class for errors that stop a menu build.

    ``str(exc)`` is the exact line reported to the user.
    """


class MenuFileNotFoundError(MenuError):
    def __init__(self, path) -> None:
        super().__init__(f"Menu file not found at {path}.")
        self.path = path


class MenuParseError(MenuError):
    pass


class MenuValidationError(MenuError):
    pass
