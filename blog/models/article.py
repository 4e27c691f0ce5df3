"""
Article Model
"""

import json

from blog.extensions import db


def serialize_tags(tags):
    """Store a tag list as JSON text."""
    return json.dumps(list(tags or []), ensure_ascii=False)


def deserialize_tags(raw):
    """Turn stored tag text back into a list.

    Rows written by older clients may hold comma-separated text or a
    JSON null; both come back as a plain list.
    """
    if raw is None or raw == '':
        return []
    if isinstance(raw, list):
        return raw
    try:
        value = json.loads(raw)
    except ValueError:
        return [t.strip() for t in raw.split(',') if t.strip()]
    if value is None:
        return []
    if isinstance(value, list):
        return [str(t) for t in value]
    return [str(value)]


class Article(db.Model):
    """A published article"""
    __tablename__ = 'articles'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.Text, nullable=False)
    category = db.Column(db.Text)
    description = db.Column(db.Text)
    tags = db.Column(db.Text)
    content = db.Column(db.Text, nullable=False)
    read_time = db.Column('readTime', db.Text)
    created_at = db.Column('createdAt', db.Text, nullable=False)

    __table_args__ = {'sqlite_autoincrement': True}

    @property
    def tag_list(self):
        return deserialize_tags(self.tags)

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'category': self.category,
            'description': self.description,
            'tags': self.tag_list,
            'content': self.content,
            'readTime': self.read_time,
            'createdAt': self.created_at,
        }

    def __repr__(self):
        return f'<Article {self.id} {self.title!r}>'
