"""
Article entity and its wire/document codec.

On the wire an article is ``{"id", "title", "content", "author"}`` with the
id as a 24 character hex string. In MongoDB the id lives in ``_id`` as an
``ObjectId``. Empty fields are left out of both representations.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Type

from bson import ObjectId
from bson.errors import InvalidId

from .errors import ArticleServiceError, BackendError, InputError

TEXT_FIELDS = ('title', 'content', 'author')

# an all-zero id counts as unset, so MongoDB assigns a fresh one
NIL_OBJECT_ID = ObjectId('0' * 24)


def parse_object_id(value: str) -> ObjectId:
    """Parse a hex id, raising InputError with the driver's message."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise InputError(str(e)) from e


def _text_field(source: Dict[str, Any], key: str,
                error_cls: Type[ArticleServiceError]) -> str:
    value = source.get(key)
    if value is None:
        return ''
    if not isinstance(value, str):
        raise error_cls(
            f"cannot decode {type(value).__name__} into string field '{key}'"
        )
    return value


@dataclass
class Article:
    """A single blog article."""
    
    title: str = ''
    content: str = ''
    author: str = ''
    id: Optional[ObjectId] = None
    
    @classmethod
    def from_json(cls, payload: Any) -> 'Article':
        """
        Build an article from a decoded request body.
        
        Unknown keys are ignored. A present, non-empty ``id`` must be a
        valid ObjectId hex string.
        
        Raises:
            InputError: If the body is not an object or a field has the wrong type
        """
        if not isinstance(payload, dict):
            raise InputError(
                f"cannot decode JSON {type(payload).__name__} into an article object"
            )
        
        article_id = payload.get('id')
        if article_id in (None, ''):
            parsed_id = None
        elif isinstance(article_id, str):
            parsed_id = parse_object_id(article_id)
            if parsed_id == NIL_OBJECT_ID:
                parsed_id = None
        else:
            raise InputError(
                f"cannot decode {type(article_id).__name__} into field 'id'"
            )
        
        return cls(
            title=_text_field(payload, 'title', InputError),
            content=_text_field(payload, 'content', InputError),
            author=_text_field(payload, 'author', InputError),
            id=parsed_id,
        )
    
    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> 'Article':
        """
        Build an article from a stored MongoDB document.
        
        Raises:
            BackendError: If the document does not have the article shape
        """
        document_id = document.get('_id')
        if document_id is not None and not isinstance(document_id, ObjectId):
            raise BackendError(
                f"cannot decode {type(document_id).__name__} into an ObjectId"
            )
        
        return cls(
            title=_text_field(document, 'title', BackendError),
            content=_text_field(document, 'content', BackendError),
            author=_text_field(document, 'author', BackendError),
            id=document_id,
        )
    
    def missing_fields(self) -> list:
        """Names of required text fields that are empty."""
        return [name for name in TEXT_FIELDS if not getattr(self, name)]
    
    def to_document(self) -> Dict[str, Any]:
        """MongoDB document for insertion; ``_id`` only when already assigned."""
        document: Dict[str, Any] = {}
        if self.id is not None:
            document['_id'] = self.id
        for name in TEXT_FIELDS:
            value = getattr(self, name)
            if value:
                document[name] = value
        return document
    
    def to_json(self) -> Dict[str, Any]:
        """JSON-serializable dict with empty fields omitted."""
        data: Dict[str, Any] = {}
        if self.id is not None:
            data['id'] = str(self.id)
        for name in TEXT_FIELDS:
            value = getattr(self, name)
            if value:
                data[name] = value
        return data
