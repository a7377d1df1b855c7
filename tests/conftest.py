"""Test configuration and fixtures for the blog engine."""

import time
from datetime import datetime, timezone
from typing import Any, Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy.pool import StaticPool

from blogengine import create_app
from blogengine.extensions import db
from blogengine.models import BlogUser, Post, Tag
from blogengine.utils.crypto import hash_password
from blogengine.views import PageContext, ViewFactory


@pytest.fixture
def app() -> Generator[Flask, None, None]:
    """Create and configure a test Flask application."""
    # Use in-memory SQLite for each test
    test_config = {
        'TESTING': True,
        'WTF_CSRF_ENABLED': False,  # Disable CSRF for testing
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'SQLALCHEMY_ENGINE_OPTIONS': {
            'poolclass': StaticPool,
            'connect_args': {'check_same_thread': False}
        },
        'SECRET_KEY': 'test-secret-key',
        'SESSION_COOKIE_SECURE': False,
        'RATELIMIT_ENABLED': False,  # Disable rate limiting for tests
        'BLOG_POSTS_PER_PAGE': 10,
        'BLOG_DISQUS_NAME': None,
        'BLOG_SITE_TWITTER_HANDLE': None,
    }

    app = create_app(test_config)

    with app.app_context():
        db.create_all()
        yield app

        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def runner(app: Flask):
    """Create a test CLI runner."""
    return app.test_cli_runner()


@pytest.fixture
def author(app: Flask) -> BlogUser:
    """The author most posts are written by."""
    user = BlogUser(
        name='Luke',
        username='luke',
        password_hash=hash_password('password123'),
        twitter_handle='luke',
    )
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def other_author(app: Flask) -> BlogUser:
    user = BlogUser(
        name='Leia',
        username='leia',
        password_hash=hash_password('password456'),
    )
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def make_post(app: Flask, author: BlogUser):
    """Factory for stored posts; slugs go through the unique slug lookup."""

    def _make_post(
        title: str = 'Test Path',
        contents: str = 'This is a blog post\n\nWith some *markdown*.',
        *,
        published: bool = True,
        tags: list[str] | None = None,
        created: float | None = None,
        by: BlogUser | None = None,
    ) -> Post:
        post = Post(
            title=title,
            contents=contents,
            author=by or author,
            published=published,
            created=created if created is not None else time.time(),
            slug_url=Post.generate_unique_slug(title).slug,
        )
        for name in tags or []:
            tag = db.session.execute(db.select(Tag).filter_by(name=name)).scalar_one_or_none()
            post.tags.append(tag or Tag(name=name))
        db.session.add(post)
        db.session.commit()
        return post

    return _make_post


@pytest.fixture
def test_post(make_post) -> Post:
    """A published post tagged 'tatooine' created on a fixed date."""
    created = datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc).timestamp()
    return make_post(
        'Test Path',
        'This is a blog post\n\n![Binary sunset](https://example.com/sunset.png)\n\nMore text.',
        tags=['tatooine'],
        created=created,
    )


@pytest.fixture
def authenticated_client(client: FlaskClient, author: BlogUser) -> FlaskClient:
    """Create a client with a signed-in author session."""
    with client.session_transaction() as sess:
        sess['_user_id'] = str(author.id)
        sess['_fresh'] = True
    return client


class RecordingRenderer:
    """Renderer double that records every template call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def __call__(self, template: str, params: dict[str, Any]) -> dict[str, Any]:
        self.calls.append((template, params))
        return {'template': template, 'params': params}

    @property
    def template(self) -> str:
        return self.calls[-1][0]

    @property
    def params(self) -> dict[str, Any]:
        return self.calls[-1][1]


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def factory(renderer: RecordingRenderer) -> ViewFactory:
    return ViewFactory(renderer)


@pytest.fixture
def recorded_app(app: Flask, renderer: RecordingRenderer) -> RecordingRenderer:
    """Route all page rendering of the app through the recording renderer."""
    app.extensions['blogengine.views'] = ViewFactory(renderer)
    return renderer


@pytest.fixture
def page_context() -> PageContext:
    return PageContext(uri='https://example.com/blog/posts/test-path')
