"""Controller package - HTTP handlers"""
from .article_controller import ArticleController

__all__ = ['ArticleController']
