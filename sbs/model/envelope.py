"""
Response envelope shared by every endpoint: ``{status, message, data}``.

``data`` is one of a fixed set of payload shapes so callers know exactly
what a given endpoint hands back.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bson import ObjectId

from .article import Article
from .errors import ArticleServiceError

SUCCESS_MESSAGE = "Success"


class Payload:
    """Base for envelope payload variants."""
    
    kind = 'none'
    
    def render(self) -> Any:
        return None


class NoData(Payload):
    """Failure payload, rendered as ``null``."""
    
    kind = 'none'


@dataclass(frozen=True)
class IdOnly(Payload):
    """Create result: ``{"id": "..."}``."""
    
    article_id: ObjectId
    kind = 'id-only'
    
    def render(self) -> Dict[str, Any]:
        return Article(id=self.article_id).to_json()


@dataclass(frozen=True)
class SingleArticleList(Payload):
    """Get-by-id result: a one element list."""
    
    article: Article
    kind = 'single-article-list'
    
    def render(self) -> List[Dict[str, Any]]:
        return [self.article.to_json()]


@dataclass(frozen=True)
class ArticleList(Payload):
    """List result, possibly empty."""
    
    articles: List[Article] = field(default_factory=list)
    kind = 'article-list'
    
    def render(self) -> List[Dict[str, Any]]:
        return [article.to_json() for article in self.articles]


@dataclass
class Envelope:
    status: int
    message: str
    data: Payload = field(default_factory=NoData)
    
    @classmethod
    def success(cls, data: Payload) -> 'Envelope':
        return cls(status=200, message=SUCCESS_MESSAGE, data=data)
    
    @classmethod
    def failure(cls, status: int, message: str) -> 'Envelope':
        return cls(status=status, message=message, data=NoData())
    
    @classmethod
    def from_error(cls, error: ArticleServiceError) -> 'Envelope':
        return cls.failure(error.status_code, error.message)
    
    @property
    def is_success(self) -> bool:
        return self.status == 200
    
    def to_dict(self) -> Dict[str, Optional[Any]]:
        return {
            "status": self.status,
            "message": self.message,
            "data": self.data.render(),
        }
