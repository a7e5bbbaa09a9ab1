"""Provider connection routes."""

import logging
from urllib.parse import urlencode

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import RedirectResponse

from socialconnect.adapter.error import ProviderError
from socialconnect.application.usecase.connection import (
    BeginConnectionUseCase,
    CancelConnectionUseCase,
    CompleteConnectionUseCase,
    DisconnectUseCase,
    GetConnectionStatusUseCase,
)
from socialconnect.application.usecase.connection.begin_connection import (
    BeginConnectionRequest,
    BeginConnectionResponse,
)
from socialconnect.application.usecase.connection.cancel_connection import (
    CancelConnectionRequest,
)
from socialconnect.application.usecase.connection.complete_connection import (
    CompleteConnectionRequest,
)
from socialconnect.application.usecase.connection.disconnect import (
    DisconnectResponse,
)
from socialconnect.application.usecase.connection.get_status import (
    ConnectionStatusResponse,
)
from socialconnect.config import Settings
from socialconnect.domain.error import (
    AccountNotResolvedError,
    NotAuthorizedError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

PROVIDER = "twitter"

router = APIRouter(
    prefix=f"/connect/{PROVIDER}", tags=["connect"], route_class=DishkaRoute
)


def _frontend_redirect(settings: Settings, **params: str) -> RedirectResponse:
    query = urlencode({"provider": PROVIDER, **params})
    return RedirectResponse(
        url=f"{settings.api.frontend_url}/settings/connections?{query}",
        status_code=status.HTTP_302_FOUND,
    )


@router.get("", response_model=ConnectionStatusResponse)
async def get_connection_status(
    use_case: FromDishka[GetConnectionStatusUseCase],
) -> ConnectionStatusResponse:
    """Report whether the signed-in account is connected.

    Anonymous callers get ``connected: false``.
    """
    return await use_case.execute()


@router.post("", response_model=BeginConnectionResponse)
async def begin_connection(
    use_case: FromDishka[BeginConnectionUseCase],
    settings: FromDishka[Settings],
) -> BeginConnectionResponse:
    """Start connecting the signed-in account.

    Returns the provider URL the browser should be sent to.

    Example:
        POST /connect/twitter

        Response:
        {
            "provider": "twitter",
            "authorization_url": "https://api.twitter.com/oauth/authorize?oauth_token=..."
        }
    """
    try:
        return await use_case.execute(
            BeginConnectionRequest(
                callback_url=settings.api.connect_callback_url(PROVIDER)
            )
        )
    except AccountNotResolvedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except ProviderError as e:
        logger.warning(f"Failed to start {PROVIDER} connection: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to start connection: {e}",
        )


@router.get("/callback")
async def connection_callback(
    use_case: FromDishka[CompleteConnectionUseCase],
    cancel_use_case: FromDishka[CancelConnectionUseCase],
    settings: FromDishka[Settings],
    oauth_token: str | None = None,
    oauth_verifier: str | None = None,
    denied: str | None = None,
):
    """Handle the provider's redirect after the user approved (or denied) access.

    Always redirects back to the frontend, with ``status=connected`` or an
    ``error`` parameter.

    Example:
        GET /connect/twitter/callback?oauth_token=abc&oauth_verifier=xyz

        Redirects to: http://localhost:3000/settings/connections?provider=twitter&status=connected
    """
    if denied or not oauth_token or not oauth_verifier:
        logger.info(f"{PROVIDER} connection denied or incomplete callback")
        # Twitter sends the declined request token as ``denied``
        declined = denied or oauth_token
        if declined:
            await cancel_use_case.execute(CancelConnectionRequest(oauth_token=declined))
        return _frontend_redirect(settings, error="access_denied")

    try:
        await use_case.execute(
            CompleteConnectionRequest(
                oauth_token=oauth_token, oauth_verifier=oauth_verifier
            )
        )
    except AccountNotResolvedError:
        return _frontend_redirect(settings, error="not_signed_in")
    except (NotFoundError, NotAuthorizedError) as e:
        logger.warning(f"Rejected {PROVIDER} callback: {e}")
        return _frontend_redirect(settings, error="invalid_request_token")
    except ProviderError as e:
        logger.error(f"Failed to complete {PROVIDER} connection: {e}")
        return _frontend_redirect(settings, error="provider_error")

    return _frontend_redirect(settings, status="connected")


@router.delete("", response_model=DisconnectResponse)
async def disconnect(
    use_case: FromDishka[DisconnectUseCase],
) -> DisconnectResponse:
    """Remove the signed-in account's connection. Idempotent."""
    try:
        return await use_case.execute()
    except AccountNotResolvedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
