from werkzeug.exceptions import Forbidden, NotFound


class ConfigurationError(ValueError):
    """Invalid root path, port or interface given at startup"""


class BindError(OSError):
    """The listening socket could not be acquired"""


class NotFoundError(NotFound):
    description = "The requested path does not exist."


class ForbiddenError(Forbidden):
    description = "The requested path is outside of the served root."
