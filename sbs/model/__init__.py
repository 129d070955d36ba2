"""Model package - Database, article codec and store operations"""
from .article import Article
from .article_model import ArticleModel
from .database import Database
from .envelope import Envelope
from .errors import (
    ArticleServiceError,
    BackendError,
    InputError,
    NotFoundError,
    StorageConnectionError,
)

__all__ = [
    'Article',
    'ArticleModel',
    'Database',
    'Envelope',
    'ArticleServiceError',
    'BackendError',
    'InputError',
    'NotFoundError',
    'StorageConnectionError',
]
