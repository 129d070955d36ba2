"""
Error taxonomy for article requests.

Every failure a handler can hit is raised as one of these classes, so the
HTTP status is decided by the type and the message stays the raw text of
whatever went wrong underneath.
"""


class ArticleServiceError(Exception):
    """Base class for errors rendered into a response envelope."""
    
    status_code = 500
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
    
    def __str__(self) -> str:
        return self.message


class InputError(ArticleServiceError):
    """Malformed JSON, a missing required field or a malformed id."""
    
    status_code = 400


class NotFoundError(ArticleServiceError):
    """A query matched no document."""
    
    status_code = 404


class BackendError(ArticleServiceError):
    """Connection, query or stored-document decode failure."""
    
    status_code = 500


class StorageConnectionError(Exception):
    """Raised at startup when MongoDB cannot be reached."""
    pass
