"""
Database Model - MongoDB connection handle
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .errors import StorageConnectionError

logger = logging.getLogger(__name__)


class Database:
    """
    Process-wide handle on the article collection.
    
    Built once at startup and handed to ``create_app``; request handlers
    only ever read ``articles``. ``MongoClient`` pools connections and is
    safe to share between request threads.
    """
    
    def __init__(self, client: MongoClient, database_name: str = "sbs",
                 collection_name: str = "articles"):
        self._client: Optional[MongoClient] = client
        self._db = client[database_name]
        self.articles: Collection = self._db[collection_name]
        self.database_name = database_name
        self.collection_name = collection_name
    
    @classmethod
    def connect(cls, connection_string: str = "mongodb://localhost:27017",
                database_name: str = "sbs", collection_name: str = "articles",
                timeout_ms: int = 5000) -> 'Database':
        """
        Open a client and verify the server answers a ping.
        
        Raises:
            StorageConnectionError: If the server cannot be reached
        """
        logger.info("Connecting to DB...")
        try:
            client = MongoClient(
                connection_string,
                maxPoolSize=50,
                minPoolSize=10,
                serverSelectionTimeoutMS=timeout_ms
            )
            client.admin.command('ping')
        except PyMongoError as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise StorageConnectionError(str(e)) from e
        
        logger.info(f"Connected to MongoDB database: {database_name}")
        return cls(client, database_name, collection_name)
    
    def close(self) -> None:
        """Close database connection"""
        if self._client:
            self._client.close()
            self._client = None
            logger.info("MongoDB connection closed")
    
    @property
    def is_connected(self) -> bool:
        """Check if database is connected"""
        return self._client is not None
