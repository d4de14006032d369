"""Token acquisition from the authentication endpoint.

Tokens are never cached: each call performs a full credential exchange.
"""

import logging
from typing import Optional, Tuple

from ..client import ApiClient
from ..config import Settings
from ..exceptions import AuthenticationError, BearerApiClientError
from ..models import AuthRequest, TokenResponse
from ..utils.json import from_json, to_json

logger = logging.getLogger(__name__)

AUTH_PATH = "/v1/Autenticacao"


class TokenService:
    """Obtain bearer tokens by posting the configured credentials.

    :param api_client: Client used for the unauthenticated POST
    :type api_client: ApiClient
    :param settings: Settings providing ``base_uri``, ``usuario`` and ``senha``
    :type settings: Settings
    """

    def __init__(self, api_client: ApiClient, settings: Settings):
        if api_client is None:
            raise ValueError("api_client is required")
        if settings is None:
            raise ValueError("settings is required")
        self._api_client = api_client
        self._settings = settings

    def _build_request_data(self) -> Tuple[str, Optional[str]]:
        auth_request = AuthRequest(
            usuario=self._settings.usuario,
            senha=self._settings.senha,
        )
        url = f"{self._settings.base_uri}{AUTH_PATH}"
        return url, to_json(auth_request)

    async def obtain_token(self, timeout: Optional[float] = None) -> str:
        """Exchange the configured credentials for a bearer token.

        :param timeout: Optional limit, in seconds, for each send attempt;
                        defaults to ``settings.request_timeout``
        :type timeout: Optional[float]
        :return: The token, or an empty string if the response had none
        :rtype: str
        :raises AuthenticationError: If the exchange failed or the response
                                     could not be decoded
        """
        url, content = self._build_request_data()
        effective_timeout = timeout if timeout is not None else self._settings.request_timeout
        logger.debug(f"Requesting authentication token from {url}")

        try:
            response = await self._api_client.post(url, content, timeout=effective_timeout)
        except Exception as e:
            raise AuthenticationError(
                "Erro ao obter token de autenticação",
                details={"url": url, "error_type": type(e).__name__},
            ) from e

        if response is None:
            raise AuthenticationError(
                "Erro ao obter token de autenticação",
                details={"url": url},
            )

        try:
            token_response = from_json(response, TokenResponse)
        except BearerApiClientError as e:
            raise AuthenticationError(
                "Erro ao obter token de autenticação: resposta inválida",
                details={"url": url},
            ) from e

        return token_response.token if token_response else ""
