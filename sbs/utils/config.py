"""
Configuration management for the blog service.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class ConfigurationError(Exception):
    """Raised when configuration values are missing or malformed."""
    pass


class Config:
    """Configuration class for application settings."""
    
    # MongoDB Configuration
    MONGODB_URI = os.getenv('MONGODB_URI', 'mongodb://localhost:27017')
    MONGODB_DB = os.getenv('MONGODB_DB', 'sbs')
    MONGODB_COLLECTION = os.getenv('MONGODB_COLLECTION', 'articles')
    MONGODB_TIMEOUT_MS = os.getenv('MONGODB_TIMEOUT_MS', '5000')
    
    # HTTP listener
    HOST = os.getenv('SBS_HOST', '0.0.0.0')
    PORT = os.getenv('SBS_PORT', '8080')
    DEBUG = os.getenv('SBS_DEBUG', 'false').lower() == 'true'
    
    @classmethod
    def validate(cls):
        """
        Validate that every setting is present and well-formed.
        
        Raises:
            ConfigurationError: If a value is missing or not usable
        """
        required_vars = {
            'MONGODB_URI': cls.MONGODB_URI,
            'MONGODB_DB': cls.MONGODB_DB,
            'MONGODB_COLLECTION': cls.MONGODB_COLLECTION,
            'SBS_HOST': cls.HOST,
        }
        
        missing = [var for var, value in required_vars.items() if not value]
        
        for var, value in (('SBS_PORT', cls.PORT), ('MONGODB_TIMEOUT_MS', cls.MONGODB_TIMEOUT_MS)):
            if not str(value).isdigit():
                missing.append(var)
        
        if missing:
            raise ConfigurationError(
                f"Missing or invalid environment variables: {', '.join(missing)}. "
                f"Please check your .env file."
            )
    
    @classmethod
    def port(cls) -> int:
        """HTTP listener port as an integer."""
        return int(cls.PORT)
    
    @classmethod
    def timeout_ms(cls) -> int:
        """Server selection timeout used when connecting to MongoDB."""
        return int(cls.MONGODB_TIMEOUT_MS)
