from fastapi import HTTPException, status

from quizhub.core.exceptions import ConflictError, NotFoundError, QuizHubError


def to_http_exception(error: QuizHubError) -> HTTPException:
    """Translate a service-layer error into the matching HTTP status"""
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


def internal_error(message: str, error: Exception) -> HTTPException:
    """500 carrying both a summary message and the underlying error text"""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"message": message, "error": str(error)},
    )
