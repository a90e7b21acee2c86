"""Registration orchestrator -- the primary SDK interface.

One call to :func:`register_name` drives one attempt:

  1. Preflight: validate the name, pick the registrar, check the payment key
  2. Sign the default profile
  3. Upload it to the storage hub
  4. Build the zone file
  5. Build the registration request
  6. Provision the owner key on the core node (top-level names only)
  7. Submit the registration and interpret the response

Progress is reported through ``dispatch`` as :class:`Notification` records.
Every stage returns :class:`Ok` or :class:`Err`; an ``Err`` ends the attempt
with exactly one terminal notification.  Nothing is retried.

Usage::

    log = NotificationLog()
    before_register(log)
    await register_name(
        api, "alice.id", identity, 0, identity.owner_address, keypair,
        payment_key, dispatch=log, identities=identities,
    )
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Union

import httpx
import uuid6

from namereg.protocol import (
    DEFAULT_PROFILE,
    Keypair,
    MissingPaymentKeyError,
    NameRegError,
    OwnerKeyProvisioningError,
    RegistrarRejectedError,
    RegistrarResponseError,
    is_subdomain,
    make_profile_zone_file,
    sign_profile_for_upload,
    validate_name,
)
from namereg.sdk._sync import _run_sync
from namereg.sdk.config import ApiConfig
from namereg.sdk.identity import Identity, IdentityTracker
from namereg.sdk.notifications import (
    Dispatch,
    Notification,
    profile_upload_error,
    profile_uploading,
    registration_before_submit,
    registration_error,
    registration_submitted,
    registration_submitting,
)
from namereg.sdk.owner_key import provision_owner_credential
from namereg.sdk.request import (
    RegistrationRequest,
    build_registration_request,
    registration_headers,
    select_register_url,
)
from namereg.sdk.results import Err, Ok, StageResult
from namereg.sdk.storage import upload_profile

logger = logging.getLogger(__name__)

Uploader = Callable[..., Awaitable[str]]
AttemptLogger = Union[logging.Logger, logging.LoggerAdapter]

_HTTP_TIMEOUT = 30.0


@dataclass(frozen=True)
class RegistrationContext:
    """Inputs of a single registration attempt."""

    api: ApiConfig
    domain_name: str
    identity: Identity
    identity_index: int
    owner_address: str
    keypair: Keypair
    payment_key: Optional[str] = None

    @property
    def is_subdomain(self) -> bool:
        return is_subdomain(self.domain_name)


def _chain(error: NameRegError, cause: BaseException) -> NameRegError:
    error.__cause__ = cause
    return error


def attempt_logger(domain_name: str) -> logging.LoggerAdapter:
    """Logger scoped to one attempt; ``extra`` carries the name and attempt id."""
    return logging.LoggerAdapter(
        logger, {"domain_name": domain_name, "attempt_id": str(uuid6.uuid7())}
    )


class RegistrationAttempt:
    """Sequential stage pipeline for one registration attempt."""

    def __init__(
        self,
        ctx: RegistrationContext,
        *,
        dispatch: Dispatch,
        identities: IdentityTracker,
        client: httpx.AsyncClient,
        upload: Uploader = upload_profile,
        log: AttemptLogger | None = None,
    ) -> None:
        self._ctx = ctx
        self._dispatch = dispatch
        self._identities = identities
        self._client = client
        self._upload = upload
        self._log = log or attempt_logger(ctx.domain_name)
        self._headers = registration_headers(ctx.api)

    async def run(self) -> Notification:
        """Run every stage in order and return the terminal notification."""
        ctx = self._ctx
        self._log.debug("register_name: %s", ctx.domain_name)

        preflight = self._preflight()
        if isinstance(preflight, Err):
            return self._terminal(registration_error(preflight.error))

        signed = self._sign_profile()
        if isinstance(signed, Err):
            return self._terminal(profile_upload_error(signed.error))

        self._dispatch(profile_uploading())

        profile_url = await self._upload_profile(signed.value)
        if isinstance(profile_url, Err):
            return self._terminal(profile_upload_error(profile_url.error))

        zone_file = self._build_zone_file(profile_url.value)
        if isinstance(zone_file, Err):
            return self._terminal(profile_upload_error(zone_file.error))

        request = self._build_request(zone_file.value)
        if isinstance(request, Err):
            return self._terminal(registration_error(request.error))

        self._dispatch(registration_submitting())

        provisioned = await self._provision_owner_key()
        if isinstance(provisioned, Err):
            return self._terminal(registration_error(provisioned.error))

        self._log.debug("Submitting registration for %s to %s", ctx.domain_name, request.value.url)
        response = await self._submit(request.value)
        if isinstance(response, Err):
            return self._terminal(registration_error(response.error))

        self._log.info("Successfully submitted registration for %s", ctx.domain_name)
        terminal = self._terminal(registration_submitted())
        self._track_username()
        return terminal

    # -- Stages --------------------------------------------------------------

    def _preflight(self) -> StageResult[str]:
        """Checks that need no I/O: name, registrar endpoint, payment key."""
        ctx = self._ctx
        try:
            validate_name(ctx.domain_name)
            register_url = select_register_url(ctx.api, ctx.domain_name)
        except NameRegError as exc:
            self._log.error("register_name: %s", exc)
            return Err(exc)

        if ctx.is_subdomain:
            self._log.debug("%s is a subdomain", ctx.domain_name)
        elif not ctx.payment_key:
            self._log.error("register_name: payment key not provided for non-subdomain registration")
            return Err(MissingPaymentKeyError(ctx.domain_name))
        return Ok(register_url)

    def _sign_profile(self) -> StageResult[str]:
        self._log.debug("Signing a blank default profile for %s", self._ctx.domain_name)
        try:
            return Ok(sign_profile_for_upload(DEFAULT_PROFILE, self._ctx.keypair))
        except NameRegError as exc:
            self._log.error("register_name: error signing profile: %s", exc)
            return Err(exc)

    async def _upload_profile(self, signed_profile: str) -> StageResult[str]:
        ctx = self._ctx
        self._log.debug("Uploading %s profile", ctx.domain_name)
        try:
            profile_url = await self._upload(
                ctx.api, ctx.identity, ctx.keypair, signed_profile, client=self._client
            )
        except Exception as exc:
            # The uploader is pluggable; its error is reported unchanged.
            self._log.error("register_name: error uploading profile: %s", exc, exc_info=True)
            return Err(exc)
        self._log.debug("Profile for %s uploaded to %s", ctx.domain_name, profile_url)
        return Ok(profile_url)

    def _build_zone_file(self, profile_url: str) -> StageResult[str]:
        try:
            return Ok(make_profile_zone_file(self._ctx.domain_name, profile_url))
        except NameRegError as exc:
            self._log.error("register_name: %s", exc)
            return Err(exc)

    def _build_request(self, zone_file: str) -> StageResult[RegistrationRequest]:
        ctx = self._ctx
        try:
            return Ok(build_registration_request(
                ctx.api,
                ctx.domain_name,
                ctx.owner_address,
                zone_file,
                payment_key=ctx.payment_key,
            ))
        except NameRegError as exc:
            self._log.error("register_name: %s", exc)
            return Err(exc)

    async def _provision_owner_key(self) -> StageResult[None]:
        ctx = self._ctx
        try:
            await provision_owner_credential(
                ctx.api.owner_key_url,
                self._headers,
                ctx.keypair,
                ctx.is_subdomain,
                client=self._client,
            )
        except httpx.HTTPError as exc:
            self._log.error("register_name: error setting owner key: %s", exc)
            return Err(_chain(
                OwnerKeyProvisioningError(f"Failed to set owner key: {exc}"), exc
            ))
        return Ok(None)

    async def _submit(self, request: RegistrationRequest) -> StageResult[dict]:
        try:
            resp = await self._client.post(
                request.url, headers=self._headers, content=request.content()
            )
            response_json = json.loads(resp.text)
        except httpx.HTTPError as exc:
            self._log.error("register_name: error POSTing registration to %s: %s", request.url, exc)
            return Err(_chain(
                RegistrarResponseError(f"Registration request failed: {exc}"), exc
            ))
        except (ValueError, RecursionError) as exc:
            self._log.error("register_name: undecodable registrar response: %s", exc)
            return Err(_chain(
                RegistrarResponseError(f"Invalid registrar response: {exc}"), exc
            ))

        if not isinstance(response_json, dict):
            self._log.error("register_name: unexpected registrar response %r", response_json)
            return Err(RegistrarResponseError(
                f"Unexpected registrar response: {response_json!r}"
            ))
        if response_json.get("error"):
            self._log.error("register_name: registrar error: %s", response_json["error"])
            return Err(RegistrarRejectedError(response_json["error"]))
        return Ok(response_json)

    # -- Helpers -------------------------------------------------------------

    def _terminal(self, notification: Notification) -> Notification:
        self._dispatch(notification)
        return notification

    def _track_username(self) -> None:
        ctx = self._ctx
        try:
            self._identities.add_username(ctx.identity_index, ctx.domain_name)
        except Exception:
            # The registration is already submitted; tracking is fire-and-forget.
            self._log.error(
                "Failed to track %s for identity %d",
                ctx.domain_name,
                ctx.identity_index,
                exc_info=True,
            )


# -- Entry points -------------------------------------------------------------


def before_register(dispatch: Dispatch) -> None:
    """Emit ``REGISTRATION_BEFORE_SUBMIT``; called before :func:`register_name`."""
    logger.debug("before_register")
    dispatch(registration_before_submit())


async def register_name(
    api: ApiConfig,
    domain_name: str,
    identity: Identity,
    identity_index: int,
    owner_address: str,
    keypair: Keypair,
    payment_key: str | None = None,
    *,
    dispatch: Dispatch,
    identities: IdentityTracker,
    client: httpx.AsyncClient | None = None,
    upload: Uploader = upload_profile,
    log: AttemptLogger | None = None,
) -> Notification:
    """Register *domain_name* and return the terminal notification.

    When *client* is omitted an ``httpx.AsyncClient`` is opened for the
    attempt and closed when it ends.
    """
    ctx = RegistrationContext(
        api=api,
        domain_name=domain_name,
        identity=identity,
        identity_index=identity_index,
        owner_address=owner_address,
        keypair=keypair,
        payment_key=payment_key,
    )
    options = dict(dispatch=dispatch, identities=identities, upload=upload, log=log)

    if client is not None:
        return await RegistrationAttempt(ctx, client=client, **options).run()
    async with httpx.AsyncClient(timeout=_HTTP_TIMEOUT) as owned_client:
        return await RegistrationAttempt(ctx, client=owned_client, **options).run()


def register_name_sync(*args, **kwargs) -> Notification:
    """Synchronous wrapper around :func:`register_name`."""
    return _run_sync(register_name(*args, **kwargs))
