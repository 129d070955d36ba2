"""
Simple Blog System - Entry Point
Connects to MongoDB, then serves the article API until interrupted.
"""
import argparse
import logging
import sys

from sbs import create_app
from sbs.model.database import Database
from sbs.model.errors import StorageConnectionError
from sbs.utils.config import Config, ConfigurationError


def setup_logging(verbose: bool = False):
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO
    
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def main(argv=None):
    """Run the blog service"""
    parser = argparse.ArgumentParser(
        description='Simple Blog System - article API backed by MongoDB'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging (DEBUG level)'
    )
    args = parser.parse_args(argv)
    
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)
    logger.info("Starting Simple Blog System...")
    
    try:
        Config.validate()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)
    
    try:
        database = Database.connect(
            connection_string=Config.MONGODB_URI,
            database_name=Config.MONGODB_DB,
            collection_name=Config.MONGODB_COLLECTION,
            timeout_ms=Config.timeout_ms()
        )
    except StorageConnectionError as e:
        logger.error(f"Failed to initialize storage: {e}")
        logger.error("Please ensure MongoDB is running")
        sys.exit(1)
    
    app = create_app(database)
    
    try:
        app.run(
            host=Config.HOST,
            port=Config.port(),
            debug=Config.DEBUG,
            use_reloader=False,
            threaded=True
        )
    except SystemExit as e:
        # werkzeug exits with status 1 when the port cannot be bound
        if e.code:
            logger.error(f"HTTP listener failed on {Config.HOST}:{Config.port()}")
        raise
    finally:
        database.close()
        logger.info("Simple Blog System shutdown complete")


if __name__ == '__main__':
    main()
