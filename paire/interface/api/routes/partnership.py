"""Partnership routes.

Invitation tokens are bearer credentials: anyone holding one can preview
the invitation, and the invitee can accept it once.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, Response, status
from pydantic import BaseModel

from paire.application.usecase.partnership import (
    INVITE_SENT_MESSAGE,
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    EndPartnershipRequest,
    EndPartnershipUseCase,
    GetInvitationDetailsRequest,
    GetInvitationDetailsUseCase,
    GetMyPartnershipRequest,
    GetMyPartnershipUseCase,
    GetPendingInvitationsRequest,
    GetPendingInvitationsUseCase,
    InvitationItem,
    ListSentInvitationsRequest,
    ListSentInvitationsResponse,
    ListSentInvitationsUseCase,
    PartnershipResponse,
    RevokeInvitationRequest,
    RevokeInvitationUseCase,
    SendInvitationRequest,
    SendInvitationUseCase,
)
from paire.domain.error import (
    DomainError,
    DuplicateInvitationError,
    InviteeUnavailableError,
)
from paire.domain.service import JWTService
from paire.interface.api.auth import authenticate
from paire.interface.api.errors import to_http_exception

router = APIRouter(
    prefix="/partnership", tags=["partnership"], route_class=DishkaRoute
)


class InviteAPIRequest(BaseModel):
    """API request for sending an invitation."""

    email: str


class InviteAPIResponse(BaseModel):
    """Generic invitation response."""

    message: str


class AcceptInvitationAPIRequest(BaseModel):
    """API request for accepting an invitation."""

    token: str


@router.post(
    "/invite",
    response_model=InviteAPIResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def send_invitation(
    request: InviteAPIRequest,
    send_invitation_use_case: FromDishka[SendInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> InviteAPIResponse:
    """Invite a partner by email.

    Only errors about the caller's own request are reported. Whether the
    target is registered, already partnered or already invited is never
    revealed: those cases get the same response as a sent invitation.

    Raises:
        HTTPException: 400 invalid request, 401 not authenticated,
            409 caller already has a partner
    """
    payload = authenticate(jwt_service, auth_token)

    try:
        await send_invitation_use_case.execute(
            SendInvitationRequest(inviter_id=payload.user_id, email=request.email)
        )
    except (InviteeUnavailableError, DuplicateInvitationError) as e:
        logfire.warn(
            "Invitation suppressed", inviter_id=payload.user_id, reason=str(e)
        )
    except DomainError as e:
        raise to_http_exception(e)

    return InviteAPIResponse(message=INVITE_SENT_MESSAGE)


@router.get("/invitation/{token}", response_model=InvitationItem)
async def get_invitation_details(
    token: str,
    get_invitation_details_use_case: FromDishka[GetInvitationDetailsUseCase],
) -> InvitationItem:
    """Preview an invitation. No authentication; never consumes the token.

    Raises:
        HTTPException: 404 if no invitation has this token
    """
    try:
        return await get_invitation_details_use_case.execute(
            GetInvitationDetailsRequest(token=token)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/pending-invitations", response_model=list[InvitationItem])
async def get_pending_invitations(
    get_pending_invitations_use_case: FromDishka[GetPendingInvitationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> list[InvitationItem]:
    """List live invitations addressed to the caller's email, newest first."""
    payload = authenticate(jwt_service, auth_token)

    try:
        response = await get_pending_invitations_use_case.execute(
            GetPendingInvitationsRequest(user_id=payload.user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)

    return response.invitations


@router.post("/accept-invitation", response_model=AcceptInvitationResponse)
async def accept_invitation(
    request: AcceptInvitationAPIRequest,
    accept_invitation_use_case: FromDishka[AcceptInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AcceptInvitationResponse:
    """Accept an invitation and link the caller with the inviter.

    Raises:
        HTTPException: 401 not authenticated, 403 invitation is for another
            email, 404 unknown or already used, 409 either user has a partner,
            410 expired
    """
    payload = authenticate(jwt_service, auth_token)

    try:
        return await accept_invitation_use_case.execute(
            AcceptInvitationRequest(user_id=payload.user_id, token=request.token)
        )
    except DomainError as e:
        # HTTP errors are rendered inside the app, so the request session
        # still commits: an expired invitation stays marked EXPIRED.
        raise to_http_exception(e)


@router.get("", response_model=PartnershipResponse | None)
async def get_my_partnership(
    get_my_partnership_use_case: FromDishka[GetMyPartnershipUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PartnershipResponse | None:
    """Get the caller's partnership. JSON ``null`` when unlinked."""
    payload = authenticate(jwt_service, auth_token)

    return await get_my_partnership_use_case.execute(
        GetMyPartnershipRequest(user_id=payload.user_id)
    )


@router.get("/sent-invitations", response_model=ListSentInvitationsResponse)
async def list_sent_invitations(
    list_sent_invitations_use_case: FromDishka[ListSentInvitationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListSentInvitationsResponse:
    """List invitations sent by the caller, newest first.

    Args:
        list_sent_invitations_use_case: Use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie
        limit: Maximum number of results (1-100)
        offset: Number of results to skip
    """
    payload = authenticate(jwt_service, auth_token)

    return await list_sent_invitations_use_case.execute(
        ListSentInvitationsRequest(
            inviter_id=payload.user_id, limit=limit, offset=offset
        )
    )


@router.delete(
    "/invitations/{invitation_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def revoke_invitation(
    invitation_id: str,
    revoke_invitation_use_case: FromDishka[RevokeInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Revoke a pending invitation the caller sent.

    Raises:
        HTTPException: 403 not the sender, 404 unknown or no longer pending
    """
    payload = authenticate(jwt_service, auth_token)

    try:
        await revoke_invitation_use_case.execute(
            RevokeInvitationRequest(
                inviter_id=payload.user_id, invitation_id=invitation_id
            )
        )
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Invitation not found"
        )
    except DomainError as e:
        raise to_http_exception(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{partnership_id}", status_code=status.HTTP_204_NO_CONTENT)
async def end_partnership(
    partnership_id: str,
    end_partnership_use_case: FromDishka[EndPartnershipUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """End the caller's partnership. Frees both members immediately.

    Raises:
        HTTPException: 404 if no such partnership includes the caller
    """
    payload = authenticate(jwt_service, auth_token)

    try:
        await end_partnership_use_case.execute(
            EndPartnershipRequest(
                user_id=payload.user_id, partnership_id=partnership_id
            )
        )
    except ValueError:
        # Malformed id
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Partnership not found"
        )
    except DomainError as e:
        raise to_http_exception(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
