"""Create blog users, posts and tags

Revision ID: 5e1a7c0b9d42
Revises:
Create Date: 2026-10-19 09:12:44.118305

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5e1a7c0b9d42'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'blog_users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('reset_password_required', sa.Boolean(), nullable=False),
        sa.Column('profile_picture', sa.String(length=500), nullable=True),
        sa.Column('twitter_handle', sa.String(length=50), nullable=True),
        sa.Column('biography', sa.Text(), nullable=True),
        sa.Column('tagline', sa.String(length=200), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_blog_users_username', 'blog_users', ['username'], unique=True)

    op.create_table(
        'blog_tags',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_blog_tags_name', 'blog_tags', ['name'], unique=True)

    op.create_table(
        'blog_posts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('contents', sa.Text(), nullable=False),
        sa.Column('author_id', sa.Integer(), nullable=False),
        sa.Column('created', sa.Float(), nullable=False),
        sa.Column('last_edited', sa.Float(), nullable=True),
        sa.Column('slug_url', sa.String(length=255), nullable=False),
        sa.Column('published', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(['author_id'], ['blog_users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_blog_posts_slug_url', 'blog_posts', ['slug_url'], unique=True)
    op.create_index('ix_blog_posts_published_created', 'blog_posts', ['published', 'created'])

    op.create_table(
        'blog_post_tags',
        sa.Column('post_id', sa.Integer(), nullable=False),
        sa.Column('tag_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['post_id'], ['blog_posts.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['tag_id'], ['blog_tags.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('post_id', 'tag_id'),
    )


def downgrade():
    op.drop_table('blog_post_tags')
    op.drop_index('ix_blog_posts_published_created', table_name='blog_posts')
    op.drop_index('ix_blog_posts_slug_url', table_name='blog_posts')
    op.drop_table('blog_posts')
    op.drop_index('ix_blog_tags_name', table_name='blog_tags')
    op.drop_table('blog_tags')
    op.drop_index('ix_blog_users_username', table_name='blog_users')
    op.drop_table('blog_users')
