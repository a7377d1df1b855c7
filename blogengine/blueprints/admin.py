from __future__ import annotations

from flask import Blueprint, abort, current_app, redirect, request, url_for
from flask_login import current_user, login_required
from pydantic import ValidationError

from blogengine.forms.auth import ResetPasswordForm
from blogengine.forms.posts import DeletePostForm, PostForm
from blogengine.forms.users import UserForm
from blogengine.repositories.blog import create_post, delete_post, get_post_by_id, list_posts, update_post
from blogengine.repositories.user import create_user, get_user_by_id, list_users, set_password, update_user
from blogengine.schemas.posts import PostInput, split_tag_names
from blogengine.schemas.users import UserInput
from blogengine.views import view_factory

bp = Blueprint("admin", __name__, template_folder="../templates")

SLUG_CONFLICT = "Sorry, that post URL is already taken"
USERNAME_CONFLICT = "Sorry, that username has already been taken"


def _form_errors(form) -> list[str]:
    return [msg for messages in form.errors.values() for msg in messages]


def _supplied(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


def _post_input(form: PostForm) -> PostInput:
    return PostInput(
        title=form.title.data,
        contents=form.contents.data,
        slug_url=form.slug_url.data,
        tags=form.tags.data or "",
        published=bool(form.publish.data),
    )


def _user_input(form: UserForm) -> UserInput:
    return UserInput(
        name=form.name.data,
        username=form.username.data,
        password=form.password.data or None,
        confirm_password=form.confirm_password.data or None,
        reset_password_required=bool(form.reset_password_on_login.data),
        profile_picture=_supplied(form.profile_picture.data),
        twitter_handle=_supplied(form.twitter_handle.data),
        biography=_supplied(form.biography.data),
        tagline=_supplied(form.tagline.data),
    )


@bp.get("/")
@login_required
def dashboard():
    return view_factory().admin_view(
        published_posts=list_posts(published=True),
        draft_posts=list_posts(published=False),
        users=list_users(),
    )


# Posts

@bp.route("/posts/new", methods=["GET", "POST"])
@login_required
def post_new():
    form = PostForm()
    if not form.is_submitted():
        return view_factory().create_post_view(request.url)

    errors = _form_errors(form) if not form.validate() else []
    if not errors:
        try:
            payload = _post_input(form)
            p = create_post(
                title=payload.title,
                contents=payload.contents,
                author=current_user._get_current_object(),
                published=payload.published,
                tags=payload.tags,
                slug_source=payload.slug_url,
            )
        except ValidationError as e:
            errors = [err["msg"] for err in e.errors()]
        except ValueError:
            errors = [SLUG_CONFLICT]
        else:
            current_app.logger.info(f"Post {p.slug_url} created")
            return redirect(url_for("blog.post", slug=p.slug_url))

    return view_factory().create_post_view(
        request.url,
        errors=errors,
        title=form.title.data,
        contents=form.contents.data,
        slug_url=_supplied(form.slug_url.data),
        tags=split_tag_names(form.tags.data or ""),
        draft=not form.publish.data,
    )


@bp.route("/posts/<int:post_id>/edit", methods=["GET", "POST"])
@login_required
def post_edit(post_id: int):
    p = get_post_by_id(post_id)
    if not p:
        abort(404)

    form = PostForm()
    if not form.is_submitted():
        return view_factory().create_post_view(
            request.url,
            title=p.title,
            contents=p.contents,
            slug_url=p.slug_url,
            tags=p.tag_names,
            is_editing=True,
            post_to_edit=p,
            draft=not p.published,
        )

    errors = _form_errors(form) if not form.validate() else []
    if not errors:
        try:
            payload = _post_input(form)
            # The slug stays put unless the editor typed a different one
            slug_source = payload.slug_url if payload.slug_url not in (None, p.slug_url) else None
            update_post(
                p,
                title=payload.title,
                contents=payload.contents,
                published=payload.published,
                tags=payload.tags,
                slug_source=slug_source,
            )
        except ValidationError as e:
            errors = [err["msg"] for err in e.errors()]
        except ValueError:
            errors = [SLUG_CONFLICT]
        else:
            return redirect(url_for("blog.post", slug=p.slug_url))

    return view_factory().create_post_view(
        request.url,
        errors=errors,
        title=form.title.data,
        contents=form.contents.data,
        slug_url=_supplied(form.slug_url.data),
        tags=split_tag_names(form.tags.data or ""),
        is_editing=True,
        post_to_edit=p,
        draft=not form.publish.data,
    )


@bp.post("/posts/<int:post_id>/delete")
@login_required
def post_delete(post_id: int):
    form = DeletePostForm()
    if not form.validate_on_submit():
        abort(400)
    p = get_post_by_id(post_id)
    if not p:
        abort(404)
    delete_post(p)
    current_app.logger.info(f"Post {post_id} deleted")
    return redirect(url_for("admin.dashboard"))


# Users

def _user_form_view(form: UserForm, errors: list[str], *, editing: bool = False, user_id: int | None = None):
    return view_factory().create_user_view(
        editing=editing,
        errors=errors,
        name=_supplied(form.name.data),
        username=_supplied(form.username.data),
        password_error=bool(form.password.errors) or None,
        confirm_password_error=bool(form.confirm_password.errors) or None,
        reset_password_required=bool(form.reset_password_on_login.data) or None,
        user_id=user_id,
        profile_picture=_supplied(form.profile_picture.data),
        twitter_handle=_supplied(form.twitter_handle.data),
        biography=_supplied(form.biography.data),
        tagline=_supplied(form.tagline.data),
    )


@bp.route("/users/new", methods=["GET", "POST"])
@login_required
def user_new():
    form = UserForm()
    if not form.is_submitted():
        return view_factory().create_user_view()

    if not form.validate():
        return _user_form_view(form, _form_errors(form))
    if not form.password.data:
        form.password.errors = ["You must specify a password"]
        return _user_form_view(form, ["You must specify a password"])

    try:
        payload = _user_input(form)
        create_user(
            name=payload.name,
            username=payload.username,
            password=payload.password,
            reset_password_required=payload.reset_password_required,
            profile_picture=payload.profile_picture,
            twitter_handle=payload.twitter_handle,
            biography=payload.biography,
            tagline=payload.tagline,
        )
    except ValidationError as e:
        return _user_form_view(form, [err["msg"] for err in e.errors()])
    except ValueError:
        return _user_form_view(form, [USERNAME_CONFLICT])
    return redirect(url_for("admin.dashboard"))


@bp.route("/users/<int:user_id>/edit", methods=["GET", "POST"])
@login_required
def user_edit(user_id: int):
    user = get_user_by_id(user_id)
    if not user:
        abort(404)

    form = UserForm()
    if not form.is_submitted():
        return view_factory().create_user_view(
            editing=True,
            name=user.name,
            username=user.username,
            reset_password_required=user.reset_password_required or None,
            user_id=user.id,
            profile_picture=user.profile_picture,
            twitter_handle=user.twitter_handle,
            biography=user.biography,
            tagline=user.tagline,
        )

    if not form.validate():
        return _user_form_view(form, _form_errors(form), editing=True, user_id=user.id)

    try:
        payload = _user_input(form)
        update_user(
            user,
            name=payload.name,
            username=payload.username,
            password=payload.password,
            reset_password_required=payload.reset_password_required,
            profile_picture=payload.profile_picture,
            twitter_handle=payload.twitter_handle,
            biography=payload.biography,
            tagline=payload.tagline,
        )
    except ValidationError as e:
        return _user_form_view(form, [err["msg"] for err in e.errors()], editing=True, user_id=user.id)
    except ValueError:
        return _user_form_view(form, [USERNAME_CONFLICT], editing=True, user_id=user.id)
    return redirect(url_for("admin.dashboard"))


@bp.route("/resetPassword", methods=["GET", "POST"])
@login_required
def reset_password():
    form = ResetPasswordForm()
    if form.validate_on_submit():
        set_password(current_user._get_current_object(), form.password.data)
        return redirect(url_for("admin.dashboard"))
    if form.is_submitted():
        return view_factory().reset_password_view(
            errors=_form_errors(form),
            password_error=bool(form.password.errors) or None,
            confirm_password_error=bool(form.confirm_password.errors) or None,
        )
    return view_factory().reset_password_view()
