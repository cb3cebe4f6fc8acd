class QuizHubError(Exception):
    """Base class for errors raised by the service layer"""


class InvalidInputError(QuizHubError, ValueError):
    """Missing or malformed field, or a reference to a set that does not exist"""


class NotFoundError(QuizHubError, LookupError):
    """An identifier from the request path does not resolve to a record"""


class ConflictError(QuizHubError):
    """A uniqueness constraint was violated by an otherwise valid request"""
