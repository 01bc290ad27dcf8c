from abc import ABC
from typing import Any, Dict, List, Optional, Type, TypeVar, Union
import httpx
import logging

from pydantic import BaseModel, ValidationError

from ..config import service_config
from ..version import __version__
from .errors import CredentialsError, InvalidResponseError, ParameterError, RemoteError
from .models.base import ErrorEnvelope
from .rate_limits import RateLimits, RateLimitSnapshot
from .url_strategy import get_url_builder

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)
ParamsT = TypeVar("ParamsT", bound=BaseModel)
Form = Dict[str, Union[str, List[str]]]


class Auth(BaseModel):
    """Application ID and key identifying the caller. Both are required."""
    application_id: str = ""
    application_key: str = ""

    def validate_credentials(self) -> None:
        if not self.application_id or not self.application_key:
            raise CredentialsError("invalid application ID or application key")


class BaseClient(ABC):
    def __init__(self, auth: Auth, use_https: bool = None, host: str = None,
                 base_path: str = None, timeout: float = None,
                 rate_limits: RateLimits = None, http_client: httpx.Client = None):
        auth.validate_credentials()
        self.auth = auth
        self.use_https = service_config.USE_HTTPS if use_https is None else use_https
        self.host = host if host else service_config.HOST
        self.base_path = service_config.BASE_PATH if base_path is None else base_path
        self.timeout = timeout if timeout else service_config.TIMEOUT
        # Shared with the other endpoints of the same TextAPI
        self.rate_limits = rate_limits if rate_limits is not None else RateLimits()
        self._owns_client = http_client is None
        self.client = http_client if http_client is not None else httpx.Client(timeout=self.timeout)

        # Choose the URL builder strategy
        self.url_builder = get_url_builder(self.use_https)

    def get_base_url(self) -> str:
        return self.url_builder.build_base_url(self.host, self.base_path)

    def build_url(self, path: str) -> str:
        if not path.startswith('/'):
            path = '/' + path
        return self.get_base_url() + path

    def build_headers(self, has_body: bool) -> Dict[str, str]:
        headers = {
            'User-Agent': f"{service_config.USER_AGENT_PREFIX} {__version__}",
            service_config.APPLICATION_ID_HEADER: self.auth.application_id,
            service_config.APPLICATION_KEY_HEADER: self.auth.application_key,
        }
        if has_body:
            headers['Content-Type'] = 'application/x-www-form-urlencoded'
        return headers

    def call(self, path: str, form: Optional[Form] = None,
             response_model: Optional[Type[ResponseT]] = None) -> Optional[ResponseT]:
        """
        POST `form` to `path` and decode the reply into `response_model`.

        Raises RemoteError for statuses >= 300 and InvalidResponseError when a
        success body does not match `response_model`. Transport errors from
        httpx are logged and re-raised.
        """
        full_url = self.build_url(path)
        has_body = bool(form)
        headers = self.build_headers(has_body)
        logger.debug(f"POST {full_url} fields={sorted(form) if form else []}")
        try:
            if has_body:
                response = self.client.post(full_url, data=form, headers=headers)
            else:
                response = self.client.post(full_url, headers=headers)
            body = response.read()
        except httpx.RequestError as e:
            logger.error(f"Request error occurred: {e} for URL: {full_url}")
            raise

        if response.status_code >= 300:
            raise self._remote_error(response.status_code, body, full_url)

        self.rate_limits.update(RateLimitSnapshot.from_headers(response.headers))

        if response_model is None:
            return None
        try:
            return response_model.model_validate_json(body, by_alias=True, by_name=False)
        except ValidationError as e:
            logger.error(f"Invalid {response_model.__name__} payload from {full_url}: {e.error_count()} errors")
            raise InvalidResponseError() from None

    def _remote_error(self, status_code: int, body: bytes, full_url: str) -> RemoteError:
        text = body.decode('utf-8', errors='replace')
        try:
            message = ErrorEnvelope.model_validate_json(body).error
        except ValidationError:
            message = text
        logger.error(f"HTTP error occurred: {status_code} {message.strip()} for URL: {full_url}")
        return RemoteError(message, status_code=status_code)

    # Helpers shared by the endpoints

    @staticmethod
    def resolve_params(params_model: Type[ParamsT], params: Optional[ParamsT], kwargs: Dict[str, Any]) -> ParamsT:
        # Keyword arguments override fields of an explicit params model
        if params is None:
            return params_model(**kwargs)
        if kwargs:
            return params_model(**{**params.model_dump(), **kwargs})
        return params

    @staticmethod
    def text_or_url(form: Form, text: str, url: str) -> None:
        if text:
            form['text'] = text
        elif url:
            form['url'] = url
        else:
            raise ParameterError("you must either provide url or text")

    @staticmethod
    def add_if_set(form: Form, key: str, value: Any) -> None:
        # Empty strings and non-positive numbers are left out
        if isinstance(value, bool):
            form[key] = 'true' if value else 'false'
        elif isinstance(value, int):
            if value > 0:
                form[key] = str(value)
        elif value:
            form[key] = value

    def close(self):
        if self._owns_client:
            self.client.close()
