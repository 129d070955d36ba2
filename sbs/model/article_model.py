"""
Article Model - store operations on the article collection
"""
import logging
from typing import List

from bson import ObjectId
from pymongo.errors import PyMongoError

from .article import Article
from .database import Database
from .errors import BackendError, NotFoundError

logger = logging.getLogger(__name__)

NO_DOCUMENTS_MESSAGE = "mongo: no documents in result"


class ArticleModel:
    """Article persistence on top of a shared Database handle"""
    
    def __init__(self, database: Database):
        self.db = database
    
    def insert_article(self, article: Article) -> ObjectId:
        """
        Insert one article and return its id.
        
        Raises:
            BackendError: If MongoDB rejects the insert (including duplicate ids)
        """
        try:
            result = self.db.articles.insert_one(article.to_document())
        except PyMongoError as e:
            logger.error(f"Database error while inserting article: {e}")
            raise BackendError(str(e)) from e
        
        logger.info(f"Inserted article: {result.inserted_id}")
        return result.inserted_id
    
    def get_article_by_id(self, article_id: ObjectId) -> Article:
        """
        Fetch exactly one article.
        
        Raises:
            NotFoundError: If no document has this id
            BackendError: If the query fails or the document cannot be decoded
        """
        try:
            document = self.db.articles.find_one({"_id": article_id})
        except PyMongoError as e:
            logger.error(f"Database error while retrieving article {article_id}: {e}")
            raise BackendError(str(e)) from e
        
        if document is None:
            raise NotFoundError(NO_DOCUMENTS_MESSAGE)
        
        return Article.from_document(document)
    
    def get_all_articles(self) -> List[Article]:
        """
        Fetch every article in store order.
        
        A single undecodable document fails the whole call; nothing
        already decoded is returned.
        
        Raises:
            BackendError: If the query, the cursor or a decode fails
        """
        articles = []
        try:
            with self.db.articles.find({}) as cursor:
                for document in cursor:
                    articles.append(Article.from_document(document))
        except PyMongoError as e:
            logger.error(f"Database error while retrieving articles: {e}")
            raise BackendError(str(e)) from e
        
        return articles
