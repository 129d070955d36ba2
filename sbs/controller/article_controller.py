"""
Article Controller - Handles the /articles routes
"""
import json
import logging

from flask import Response, jsonify, request

from ..model.article import Article, parse_object_id
from ..model.article_model import ArticleModel
from ..model.envelope import ArticleList, Envelope, IdOnly, SingleArticleList
from ..model.errors import ArticleServiceError, InputError

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "json request missing some required fields"


def render(envelope: Envelope) -> Response:
    """Write an envelope as the JSON response body with a matching status."""
    response = jsonify(envelope.to_dict())
    response.status_code = envelope.status
    return response


def render_error(error: ArticleServiceError) -> Response:
    if error.status_code >= 500:
        logger.error(f"Request failed: {error}")
    else:
        logger.debug(f"Rejected request: {error}")
    return render(Envelope.from_error(error))


class ArticleController:
    """Controller for article operations"""
    
    def __init__(self, article_model: ArticleModel):
        self.article_model = article_model
    
    def create_article(self):
        """POST /articles"""
        logger.info("Creating article...")
        try:
            try:
                payload = json.loads(request.get_data(as_text=True))
            except json.JSONDecodeError as e:
                raise InputError(str(e)) from e
            
            article = Article.from_json(payload)
            if article.missing_fields():
                raise InputError(MISSING_FIELDS_MESSAGE)
            
            logger.info("Inserting article to mongodb...")
            article_id = self.article_model.insert_article(article)
        except ArticleServiceError as e:
            return render_error(e)
        
        return render(Envelope.success(IdOnly(article_id)))
    
    def get_article(self, article_id: str):
        """GET /articles/<article_id>"""
        logger.info("Getting single article...")
        try:
            object_id = parse_object_id(article_id)
            article = self.article_model.get_article_by_id(object_id)
        except ArticleServiceError as e:
            return render_error(e)
        
        return render(Envelope.success(SingleArticleList(article)))
    
    def get_articles(self):
        """GET /articles"""
        logger.info("Getting all articles...")
        try:
            articles = self.article_model.get_all_articles()
        except ArticleServiceError as e:
            return render_error(e)
        
        return render(Envelope.success(ArticleList(articles)))
