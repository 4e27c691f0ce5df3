"""
Article Routes
"""

import json

from flask import current_app, jsonify, request, Response
from flask_login import login_required

from blog.articles import articles_bp
from blog.articles.services import (
    list_articles, get_article, create_article, update_article, delete_article,
    export_articles, import_articles, article_stats, today,
)


def _positive_int_arg(name, default):
    value = request.args.get(name, type=int)
    if value is None or value < 1:
        return default
    return value


def _json_body():
    return request.get_json(silent=True)


@articles_bp.route('/api/articles')
def index():
    """List articles newest first.

    Query Parameters:
        page: 1-based page number (default 1)
        limit: page size (default 6, capped at MAX_PAGE_LIMIT)
        q: case-insensitive search over title, category, description and tags
        tag: only articles carrying this tag
    """
    config = current_app.config
    page = _positive_int_arg('page', 1)
    limit = min(_positive_int_arg('limit', config['DEFAULT_PAGE_LIMIT']), config['MAX_PAGE_LIMIT'])
    results = list_articles(page, limit, q=request.args.get('q'), tag=request.args.get('tag'))

    response = jsonify(results)
    response.headers['Cache-Control'] = 'no-store'
    return response


@articles_bp.route('/api/articles/<int:article_id>')
def show(article_id):
    """Return a single article with its tags as a list."""
    return jsonify(get_article(article_id).to_dict())


@articles_bp.route('/api/articles', methods=['POST'])
@login_required
def create():
    """Create an article from the JSON body; the id is assigned here."""
    article = create_article(_json_body())
    return jsonify(article.to_dict()), 201


@articles_bp.route('/api/articles/<int:article_id>', methods=['PUT'])
@login_required
def update(article_id):
    """Replace an article's editable fields, keeping its id and createdAt."""
    article = update_article(article_id, _json_body())
    return jsonify(article.to_dict())


@articles_bp.route('/api/articles/<int:article_id>', methods=['DELETE'])
@login_required
def destroy(article_id):
    """Delete an article permanently."""
    delete_article(article_id)
    return '', 204


@articles_bp.route('/api/articles/export')
@login_required
def export():
    """Download every article as a JSON backup file."""
    body = json.dumps(export_articles(), indent=2, ensure_ascii=False)
    response = Response(body, mimetype='application/json')
    response.headers['Content-Disposition'] = f'attachment; filename=articles_backup_{today()}.json'
    response.headers['Cache-Control'] = 'no-store'
    return response


@articles_bp.route('/api/articles/import', methods=['POST'])
@login_required
def import_():
    """Create articles from a previously exported backup."""
    articles = import_articles(_json_body())
    return jsonify({
        'imported': len(articles),
        'results': [a.to_dict() for a in articles],
    }), 201


@articles_bp.route('/api/articles/stats')
@login_required
def stats():
    """Counters for the admin dashboard."""
    response = jsonify(article_stats())
    response.headers['Cache-Control'] = 'no-store'
    return response
