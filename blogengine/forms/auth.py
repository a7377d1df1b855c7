from __future__ import annotations

from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField, SubmitField
from wtforms.validators import DataRequired, EqualTo, Length


class LoginForm(FlaskForm):
    username = StringField(
        'Username',
        validators=[
            DataRequired(message='You must supply your username'),
            Length(min=1, max=50, message='Username must be between 1 and 50 characters')
        ],
        render_kw={'autocomplete': 'username'}
    )
    password = PasswordField(
        'Password',
        validators=[DataRequired(message='You must supply your password')],
        render_kw={'autocomplete': 'current-password'}
    )
    submit = SubmitField('Sign In')


class ResetPasswordForm(FlaskForm):
    password = PasswordField(
        'New Password',
        validators=[
            DataRequired(message='You must specify a password'),
            Length(min=10, max=256, message='Your password must be at least 10 characters long'),
        ],
        render_kw={'autocomplete': 'new-password'}
    )
    confirm_password = PasswordField(
        'Confirm Password',
        validators=[
            DataRequired(message='You must confirm your password'),
            EqualTo('password', message='Your passwords must match'),
        ],
        render_kw={'autocomplete': 'new-password'}
    )
    submit = SubmitField('Reset Password')
