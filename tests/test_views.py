"""Tests for post, author and tag projections."""

from datetime import datetime, timezone

import pytest

from blogengine.extensions import db
from blogengine.models import PostContext
from blogengine.schemas.views import (
    FullPostView,
    LongSnippetPostView,
    PlainPostView,
    ShortSnippetPostView,
    as_params,
    full_date,
    iso8601,
    project_post,
    tag_with_post_count_view,
    user_view,
    user_with_post_count_view,
)


class TestDateFormatting:

    def test_full_date(self):
        assert full_date(datetime(2026, 10, 19, 23, 59, tzinfo=timezone.utc)) == 'Monday, October 19, 2026'

    def test_full_date_single_digit_day(self):
        assert full_date(datetime(2026, 3, 5, tzinfo=timezone.utc)) == 'Thursday, March 5, 2026'

    def test_iso8601(self):
        assert iso8601(datetime(2026, 10, 19, 8, 30, 5, tzinfo=timezone.utc)) == '2026-10-19T08:30:05+0000'


class TestPostProjections:
    """Each context yields its own model with a fixed field set."""

    def test_context_selects_model(self, app, test_post):
        assert type(project_post(test_post, PostContext.PLAIN)) is PlainPostView
        assert type(project_post(test_post, PostContext.SHORT_SNIPPET)) is ShortSnippetPostView
        assert type(project_post(test_post, PostContext.LONG_SNIPPET)) is LongSnippetPostView
        assert type(project_post(test_post, PostContext.FULL)) is FullPostView

    def test_plain(self, app, test_post, author):
        params = as_params(project_post(test_post))
        assert params == {
            'id': test_post.id,
            'title': 'Test Path',
            'contents': test_post.contents,
            'bloguser_id': author.id,
            'created': test_post.created,
            'slug_url': 'test-path',
            'published': True,
        }

    def test_short_snippet(self, app, test_post):
        params = as_params(project_post(test_post, PostContext.SHORT_SNIPPET))
        assert params['short_snippet'] == test_post.short_snippet()
        assert params['author_name'] == 'Luke'
        assert params['author_username'] == 'luke'
        assert params['created_date'] == 'Monday, October 19, 2026'
        assert 'long_snippet' not in params
        assert 'tags' not in params
        assert 'created_date_iso8601' not in params

    def test_long_snippet_includes_tags(self, app, test_post):
        params = as_params(project_post(test_post, PostContext.LONG_SNIPPET))
        assert params['long_snippet'] == test_post.long_snippet()
        assert [t['name'] for t in params['tags']] == ['tatooine']
        assert 'short_snippet' not in params

    def test_long_snippet_without_tags_omits_key(self, app, make_post):
        params = as_params(project_post(make_post('Untagged'), PostContext.LONG_SNIPPET))
        assert 'tags' not in params

    def test_full(self, app, test_post):
        params = as_params(project_post(test_post, PostContext.FULL))
        assert params['short_snippet'] == test_post.short_snippet()
        assert params['long_snippet'] == test_post.long_snippet()
        assert params['created_date_iso8601'] == '2026-10-19T08:30:00+0000'
        assert params['tags'] == [{'id': test_post.tags[0].id, 'name': 'tatooine'}]
        assert 'last_edited_date' not in params
        assert 'last_edited' not in params

    def test_full_with_edit_dates(self, app, test_post):
        test_post.last_edited = datetime(2026, 10, 20, 12, 0, tzinfo=timezone.utc).timestamp()
        db.session.commit()
        params = as_params(project_post(test_post, PostContext.FULL))
        assert params['last_edited'] == test_post.last_edited
        assert params['last_edited_date'] == 'Tuesday, October 20, 2026'
        assert params['last_edited_date_iso8601'] == '2026-10-20T12:00:00+0000'

    @pytest.mark.parametrize('context', list(PostContext))
    def test_every_context_keeps_base_fields(self, app, test_post, context):
        params = as_params(project_post(test_post, context))
        for key in ('id', 'title', 'contents', 'bloguser_id', 'created', 'slug_url', 'published'):
            assert key in params


class TestUserAndTagProjections:

    def test_user_view_omits_unset_profile_fields(self, app, author):
        params = as_params(user_view(author))
        assert params == {'id': author.id, 'name': 'Luke', 'username': 'luke', 'twitter_handle': 'luke'}

    def test_user_view_never_exposes_password(self, app, author):
        assert 'password_hash' not in as_params(user_view(author))

    def test_user_with_post_count(self, app, author, make_post):
        make_post('One')
        assert as_params(user_with_post_count_view(author))['post_count'] == 1

    def test_tag_with_post_count(self, app, test_post):
        params = as_params(tag_with_post_count_view(test_post.tags[0]))
        assert params == {'id': test_post.tags[0].id, 'name': 'tatooine', 'post_count': 1}
