"""Tests for database models."""

import re
from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from blogengine.extensions import db
from blogengine.models import BlogUser, Post, SlugResult, Tag
from blogengine.models.blog import LONG_SNIPPET_LIMIT, SHORT_SNIPPET_LIMIT


def _post(contents: str) -> Post:
    return Post(title='Snippets', contents=contents, author_id=1, slug_url='snippets', created=0.0)


class TestBlogUser:
    """Test cases for BlogUser model."""

    def test_user_creation(self, app, author):
        assert author.id is not None
        assert author.name == 'Luke'
        assert author.username == 'luke'
        assert author.reset_password_required is False
        assert author.biography is None

    def test_username_unique(self, app, author):
        db.session.add(BlogUser(name='Other Luke', username='luke', password_hash='x'))
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()

    def test_get_id(self, app, author):
        assert author.get_id() == str(author.id)

    def test_post_count_ignores_drafts(self, app, author, make_post):
        make_post('One')
        make_post('Two')
        make_post('Draft', published=False)
        assert author.post_count == 2


class TestTag:
    """Test cases for Tag model."""

    def test_tag_post_count(self, app, make_post):
        make_post('One', tags=['tatooine'])
        make_post('Two', tags=['tatooine', 'hoth'])
        make_post('Three', tags=['tatooine'], published=False)
        tatooine = db.session.execute(db.select(Tag).filter_by(name='tatooine')).scalar_one()
        hoth = db.session.execute(db.select(Tag).filter_by(name='hoth')).scalar_one()
        assert tatooine.post_count == 2
        assert hoth.post_count == 1

    def test_tag_name_unique(self, app):
        db.session.add_all([Tag(name='tatooine'), Tag(name='tatooine')])
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()


class TestPost:
    """Test cases for Post model."""

    def test_post_creation(self, app, test_post, author):
        assert test_post.id is not None
        assert test_post.slug_url == 'test-path'
        assert test_post.author_id == author.id
        assert test_post.published is True
        assert test_post.last_edited is None
        assert test_post.last_edited_at is None
        assert test_post.created_at == datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc)
        assert test_post.tag_names == ['tatooine']

    def test_slug_url_unique(self, app, test_post, author):
        db.session.add(Post(title='Copy', contents='x', author=author, slug_url='test-path'))
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()

    def test_tags_are_ordered_by_name(self, app, make_post):
        post = make_post('Tagged', tags=['naboo', 'endor', 'hoth'])
        assert post.tag_names == ['endor', 'hoth', 'naboo']


class TestUniqueSlug:
    """Test cases for unique slug generation."""

    def test_slug_from_title(self, app):
        assert Post.generate_unique_slug('Hello, World! ') == SlugResult(slug='hello-world')

    def test_second_post_gets_suffix(self, app, make_post):
        make_post('Hello, World! ')
        result = Post.generate_unique_slug('Hello, World! ')
        assert result.slug == 'hello-world-2'
        assert result.verified

    def test_counter_increments_per_collision(self, app, make_post):
        slugs = [make_post('Hello, World! ').slug_url for _ in range(4)]
        assert slugs == ['hello-world', 'hello-world-2', 'hello-world-3', 'hello-world-4']

    def test_exclude_id_ignores_own_slug(self, app, make_post):
        post = make_post('Hello World')
        assert Post.generate_unique_slug('Hello World', exclude_id=post.id).slug == 'hello-world'

    @pytest.mark.parametrize('title', [
        'Hello, World! ',
        '  Multiple   spaces\tand\ttabs  ',
        'Ünïcödé & émojis 🚀 are stripped',
        'Already-hyphenated-title',
        'MiXeD CaSe 123',
        '!!!',
        '',
    ])
    def test_slug_characters(self, app, title):
        slug = Post.generate_unique_slug(title).slug
        assert re.fullmatch(r'[a-z0-9-]*', slug)

    def test_storage_error_returns_unverified_candidate(self, app, make_post):
        make_post('Hello World')
        error = OperationalError('SELECT', {}, Exception('database is locked'))
        with patch.object(db.session, 'execute', side_effect=error):
            result = Post.generate_unique_slug('Hello World')
        assert result.slug == 'hello-world'
        assert result.verified is False
        assert result.error is error


class TestSnippets:
    """Test cases for snippet extraction."""

    def test_short_content_returned_whole(self):
        assert _post('line1\nline2').short_snippet() == 'line1\nline2\n'

    def test_short_snippet_stops_after_crossing_line(self):
        # Ten lines of twenty characters each, newline included
        lines = [f'{i:02d}' + 'x' * 17 for i in range(10)]
        snippet = _post('\n'.join(lines)).short_snippet()
        assert snippet == '\n'.join(lines[:8]) + '\n'
        assert len(snippet) == 160
        assert len(snippet) > SHORT_SNIPPET_LIMIT

    def test_long_snippet_threshold(self):
        lines = ['y' * 99 for _ in range(20)]
        snippet = _post('\n'.join(lines)).long_snippet()
        # 100 characters per line: the tenth line is the first to pass 900
        assert snippet.count('\n') == 10
        assert len(snippet) == 1000
        assert len(snippet) > LONG_SNIPPET_LIMIT

    def test_single_long_line_is_kept_whole(self):
        contents = 'z' * 500
        assert _post(contents).short_snippet() == contents + '\n'

    def test_crlf_line_endings_normalized(self):
        snippet = _post('first\r\nsecond\r\nthird').short_snippet()
        assert snippet == 'first\nsecond\nthird\n'
        assert '\r' not in snippet

    def test_snippet_does_not_modify_contents(self):
        post = _post('first\r\nsecond')
        post.short_snippet()
        assert post.contents == 'first\r\nsecond'

    @pytest.mark.parametrize('total_lines', [1, 5, 12, 40])
    def test_snippet_covers_threshold(self, total_lines):
        contents = '\n'.join('abcdefghij' * 3 for _ in range(total_lines))
        snippet = _post(contents).short_snippet()
        assert len(snippet) >= min(len(contents), SHORT_SNIPPET_LIMIT)
        assert contents.startswith(snippet.rstrip('\n'))
