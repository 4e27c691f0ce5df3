"""
Article Services

Storage operations over the articles table: paginated listing with
search, CRUD, bulk import and dashboard counters.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from blog.errors import NotFound, StorageFailure, ValidationError
from blog.extensions import db
from blog.models import Article, serialize_tags

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('title', 'content')
OPTIONAL_TEXT_FIELDS = ('category', 'description', 'readTime')


def today():
    return datetime.now(timezone.utc).strftime('%Y-%m-%d')


def normalize_tags(tags):
    """Validate a tag list: trimmed, lowercase, unique, original order kept."""
    if tags is None:
        return []
    if not isinstance(tags, list):
        raise ValidationError('tags must be a list of strings')
    result = []
    for tag in tags:
        if not isinstance(tag, str):
            raise ValidationError('tags must be a list of strings')
        tag = tag.strip().lower()
        if tag and tag not in result:
            result.append(tag)
    return result


def clean_fields(data):
    """Validate an article payload and return the editable fields."""
    if not isinstance(data, dict):
        raise ValidationError('Article body must be a JSON object')

    fields = {}
    for name in REQUIRED_FIELDS:
        value = data.get(name)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f'{name} is required')
        fields[name] = value
    for name in OPTIONAL_TEXT_FIELDS:
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            raise ValidationError(f'{name} must be a string')
        fields[name] = value
    fields['tags'] = normalize_tags(data.get('tags'))
    return fields


def _created_at(data):
    value = data.get('createdAt')
    if value is None or value == '':
        return today()
    if not isinstance(value, str):
        raise ValidationError('createdAt must be a date string')
    return value


def _apply(article, fields):
    article.title = fields['title']
    article.category = fields['category']
    article.description = fields['description']
    article.tags = serialize_tags(fields['tags'])
    article.content = fields['content']
    article.read_time = fields['readTime']


def _commit(action):
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Could not %s article', action)
        raise StorageFailure(str(e))


# Category keywords the public site turns into a semester label
SEMESTER_KEYWORDS = (
    (('basic', 'fundamental'), 'Sem 1'),
    (('data structure',), 'Sem 4'),
    (('database',), 'Sem 5'),
    (('advanced',), 'Sem 6'),
)


def semester_label(category):
    """Infer the semester label shown next to an article, or None."""
    category = (category or '').lower()
    for keywords, label in SEMESTER_KEYWORDS:
        if any(k in category for k in keywords):
            return label
    return None


def escape_like(value):
    return value.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')


def _matches(article, q, tag):
    tags = article.tag_list
    if tag and tag not in tags:
        return False
    if q:
        fields = [article.title, article.category, article.description,
                  semester_label(article.category)] + tags
        return any(q in f.lower() for f in fields if f)
    return True


def _filtered_query(tag=None):
    query = Article.query
    if tag and tag.isascii() and '"' not in tag and '\\' not in tag:
        # narrows the rows; the exact per-tag check happens in _matches
        query = query.filter(Article.tags.like(f'%"{escape_like(tag)}"%', escape='\\'))
    return query


def list_articles(page, limit, q=None, tag=None):
    """Return one page of articles, newest createdAt first.

    ``next`` is present when rows remain after this page and ``previous``
    when this page does not start at the first row. With ``q`` or ``tag``
    the rows are matched field by field and tag by tag, so the window is
    taken from the matching rows.
    """
    offset = (page - 1) * limit
    q = (q or '').strip().lower()
    tag = (tag or '').strip().lower()
    query = _filtered_query(tag).order_by(Article.created_at.desc(), Article.id.desc())
    try:
        if q or tag:
            matched = [a for a in query.all() if _matches(a, q, tag)]
            total = len(matched)
            rows = matched[offset:offset + limit]
        else:
            rows = query.offset(offset).limit(limit).all()
            total = Article.query.count()
    except SQLAlchemyError as e:
        logger.exception('Could not list articles')
        raise StorageFailure(str(e))

    results = {}
    if offset + limit < total:
        results['next'] = {'page': page + 1, 'limit': limit}
    if offset > 0:
        results['previous'] = {'page': page - 1, 'limit': limit}
    results['results'] = [a.to_dict() for a in rows]
    return results


def get_article(article_id):
    try:
        article = db.session.get(Article, article_id)
    except SQLAlchemyError as e:
        logger.exception('Could not load article %s', article_id)
        raise StorageFailure(str(e))
    if article is None:
        raise NotFound()
    return article


def create_article(data):
    """Insert an article; the store assigns its id."""
    fields = clean_fields(data)
    article = Article(created_at=_created_at(data))
    _apply(article, fields)
    db.session.add(article)
    _commit('create')
    logger.info('Created article %s %r', article.id, article.title)
    return article


def update_article(article_id, data):
    """Replace the editable fields of an article; id and createdAt never change."""
    article = get_article(article_id)
    fields = clean_fields(data)
    _apply(article, fields)
    _commit('update')
    logger.info('Updated article %s', article_id)
    return article


def delete_article(article_id):
    article = get_article(article_id)
    db.session.delete(article)
    _commit('delete')
    logger.info('Deleted article %s', article_id)


def export_articles():
    try:
        rows = Article.query.order_by(Article.created_at.desc(), Article.id.desc()).all()
    except SQLAlchemyError as e:
        logger.exception('Could not export articles')
        raise StorageFailure(str(e))
    return [a.to_dict() for a in rows]


def import_articles(items):
    """Create every article in ``items``, ignoring any ids they carry.

    All items are validated before anything is written.
    """
    if not isinstance(items, list):
        raise ValidationError('Import body must be a JSON array of articles')

    prepared = []
    for index, item in enumerate(items):
        try:
            fields = clean_fields(item)
            created_at = _created_at(item)
        except ValidationError as e:
            raise ValidationError(f'Article {index + 1}: {e.message}')
        prepared.append((fields, created_at))

    articles = []
    for fields, created_at in prepared:
        article = Article(created_at=created_at)
        _apply(article, fields)
        db.session.add(article)
        articles.append(article)
    _commit('import')
    logger.info('Imported %d articles', len(articles))
    return articles


def article_stats():
    """Counters shown on the admin dashboard."""
    month = today()[:7]
    try:
        total = Article.query.count()
        categories = db.session.query(func.count(func.distinct(Article.category)))\
            .filter(Article.category.isnot(None), Article.category != '').scalar()
        this_month = Article.query.filter(Article.created_at.like(f'{month}%')).count()
    except SQLAlchemyError as e:
        logger.exception('Could not compute article stats')
        raise StorageFailure(str(e))
    return {'total': total, 'categories': categories, 'thisMonth': this_month}
