"""
Flask application factory for the Simple Blog System
"""
import logging
from typing import Optional

from flask import Flask
from werkzeug.exceptions import HTTPException

from .controller.article_controller import ArticleController, render
from .model.article_model import ArticleModel
from .model.database import Database
from .model.envelope import Envelope

logger = logging.getLogger(__name__)


def create_app(database: Database, config: Optional[dict] = None) -> Flask:
    """
    Create and configure the Flask application.
    
    Args:
        database: Connected storage handle shared by every request
        config: Optional Flask config overrides
    """
    app = Flask(__name__)
    app.json.sort_keys = False
    
    if config:
        app.config.update(config)
    
    _register_routes(app, database)
    _register_error_handlers(app)
    
    return app


def _register_routes(app: Flask, database: Database) -> None:
    """Register application routes"""
    articles = ArticleController(ArticleModel(database))
    
    app.add_url_rule('/articles', 'create_article', articles.create_article,
                     methods=['POST'], provide_automatic_options=False)
    app.add_url_rule('/articles/<article_id>', 'get_article', articles.get_article,
                     methods=['GET'], provide_automatic_options=False)
    app.add_url_rule('/articles', 'get_articles', articles.get_articles,
                     methods=['GET'], provide_automatic_options=False)


def _register_error_handlers(app: Flask) -> None:
    """Render routing errors (unknown path, wrong method) as envelopes"""
    
    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        logger.debug(f"HTTP error {error.code}: {error.description}")
        response = render(Envelope.failure(error.code, error.description))
        # MethodNotAllowed carries the Allow header
        for key, value in error.get_headers():
            if key.lower() != 'content-type':
                response.headers[key] = value
        return response


__all__ = ['create_app', 'Database']
