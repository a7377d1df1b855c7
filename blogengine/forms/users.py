from __future__ import annotations

from flask_wtf import FlaskForm
from wtforms import BooleanField, PasswordField, StringField, SubmitField, TextAreaField
from wtforms.validators import DataRequired, EqualTo, Length, Optional, Regexp


class UserForm(FlaskForm):
    name = StringField(
        'Name',
        validators=[DataRequired(message='You must specify a name'), Length(max=120)],
    )
    username = StringField(
        'Username',
        validators=[
            DataRequired(message='You must specify a username'),
            Length(max=50),
            Regexp(r'^[A-Za-z0-9_.-]+$', message='The username may only contain letters, numbers and _ . -'),
        ],
    )
    password = PasswordField(
        'Password',
        validators=[Optional(), Length(min=10, max=256, message='Your password must be at least 10 characters long')],
    )
    confirm_password = PasswordField(
        'Confirm Password',
        validators=[EqualTo('password', message='Your passwords must match')],
    )
    reset_password_on_login = BooleanField('Require password reset on login')
    profile_picture = StringField('Profile Picture URL', validators=[Optional(), Length(max=500)])
    twitter_handle = StringField('Twitter Handle', validators=[Optional(), Length(max=50)])
    biography = TextAreaField('Biography', validators=[Optional()])
    tagline = StringField('Tagline', validators=[Optional(), Length(max=200)])
    submit = SubmitField('Save User')
