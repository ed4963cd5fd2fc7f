"""Post routes.

All routes act on the authenticated user's own posts. Results are returned
in the ``{message, data?, errors?}`` envelope.
"""

import logfire

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, Request, status
from fastapi.responses import JSONResponse

from scribe.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from scribe.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from scribe.config import Settings
from scribe.interface.api.envelope import VALIDATION_MESSAGE, envelope, respond
from scribe.interface.api.forms import MalformedBodyError, read_post_input
from scribe.util.jwt import JWTError

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)

UNAUTHENTICATED = "Unauthenticated."


def _bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def _authenticate(
    get_current_user_use_case: GetCurrentUserUseCase,
    authorization: str | None,
    auth_token: str | None,
) -> str:
    """Resolve the requesting user's ID.

    The bearer header wins over the ``auth_token`` cookie.

    Raises:
        HTTPException: 401 if no valid token was sent
    """
    token = _bearer_token(authorization) or auth_token
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=UNAUTHENTICATED
        )

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except JWTError as e:
        logfire.warn("Rejected token", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=UNAUTHENTICATED
        )

    return user.user_id


def _malformed(error: MalformedBodyError) -> JSONResponse:
    logfire.warn("Malformed post body", error=str(error))
    return envelope(
        VALIDATION_MESSAGE,
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        errors={"body": [str(error)]},
    )


@router.get("")
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
    keyword: str | None = None,
    page: str | None = None,
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> JSONResponse:
    """List the user's posts, newest first, 10 per page.

    Args:
        list_posts_use_case: List posts use case from DI
        get_current_user_use_case: Get current user use case from DI
        settings: Application settings from DI
        keyword: Only posts whose title contains this text
        page: 1-based page number (anything else means page 1)
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        Page of posts with pagination metadata
    """
    owner_id = await _authenticate(get_current_user_use_case, authorization, auth_token)

    result = await list_posts_use_case.run(
        ListPostsRequest(owner_id=owner_id, keyword=keyword, page=page)
    )
    return respond(result, expose_errors=settings.debug)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(
    request: Request,
    create_post_use_case: FromDishka[CreatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> JSONResponse:
    """Create a post, optionally with a ``cover`` image (multipart).

    Args:
        request: Incoming request (form or JSON body)
        create_post_use_case: Create post use case from DI
        get_current_user_use_case: Get current user use case from DI
        settings: Application settings from DI
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        Created post (201)
    """
    owner_id = await _authenticate(get_current_user_use_case, authorization, auth_token)

    try:
        fields, cover = await read_post_input(request)
    except MalformedBodyError as e:
        return _malformed(e)

    result = await create_post_use_case.run(
        CreatePostRequest(owner_id=owner_id, cover=cover, **fields)
    )
    return respond(
        result, success_status=status.HTTP_201_CREATED, expose_errors=settings.debug
    )


@router.get("/{post_id}")
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> JSONResponse:
    """Get one of the user's posts.

    Args:
        post_id: Post UUID
        get_post_use_case: Get post use case from DI
        get_current_user_use_case: Get current user use case from DI
        settings: Application settings from DI
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        Post details, or 404 when the user has no such post
    """
    owner_id = await _authenticate(get_current_user_use_case, authorization, auth_token)

    result = await get_post_use_case.run(
        GetPostRequest(owner_id=owner_id, post_id=post_id)
    )
    return respond(result, expose_errors=settings.debug)


@router.api_route("/{post_id}", methods=["PUT", "PATCH"])
async def update_post(
    post_id: str,
    request: Request,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> JSONResponse:
    """Update one of the user's posts, optionally replacing its cover.

    Args:
        post_id: Post UUID
        request: Incoming request (form or JSON body)
        update_post_use_case: Update post use case from DI
        get_current_user_use_case: Get current user use case from DI
        settings: Application settings from DI
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        Updated post details
    """
    owner_id = await _authenticate(get_current_user_use_case, authorization, auth_token)

    try:
        fields, cover = await read_post_input(request)
    except MalformedBodyError as e:
        return _malformed(e)

    result = await update_post_use_case.run(
        UpdatePostRequest(owner_id=owner_id, post_id=post_id, cover=cover, **fields)
    )
    return respond(result, expose_errors=settings.debug)


@router.delete("/{post_id}")
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> JSONResponse:
    """Delete one of the user's posts and its cover.

    Args:
        post_id: Post UUID
        delete_post_use_case: Delete post use case from DI
        get_current_user_use_case: Get current user use case from DI
        settings: Application settings from DI
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        ``{"message": "Success"}``
    """
    owner_id = await _authenticate(get_current_user_use_case, authorization, auth_token)

    result = await delete_post_use_case.run(
        DeletePostRequest(owner_id=owner_id, post_id=post_id)
    )
    return respond(result, expose_errors=settings.debug)
