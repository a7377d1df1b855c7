from __future__ import annotations

from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField, TextAreaField
from wtforms.validators import DataRequired, Length, Optional


class PostForm(FlaskForm):
    title = StringField(
        'Title',
        validators=[
            DataRequired(message='You must specify a blog post title'),
            Length(max=200, message='Title must be at most 200 characters'),
        ],
    )
    contents = TextAreaField(
        'Contents',
        validators=[DataRequired(message='You must have some content in your blog post')],
        render_kw={'rows': 20},
    )
    slug_url = StringField('Slug', validators=[Optional(), Length(max=255)])
    tags = StringField('Tags', validators=[Optional()], render_kw={'placeholder': 'comma,separated,tags'})
    publish = SubmitField('Publish')
    save_draft = SubmitField('Save Draft')


class DeletePostForm(FlaskForm):
    submit = SubmitField('Delete')
