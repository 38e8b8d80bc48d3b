"""
WeChat Cover Ingestion Module - 文章页抓取
"""
from .article import fetch_article_html

__all__ = ["fetch_article_html"]
