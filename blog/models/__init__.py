"""
Models Package

Exports all models for easy importing.
"""

from blog.models.article import Article, serialize_tags, deserialize_tags
from blog.models.admin import AdminUser

__all__ = ['Article', 'AdminUser', 'serialize_tags', 'deserialize_tags']
