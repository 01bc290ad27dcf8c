import httpx

from .api.classification import Classification
from .api.client_base import Auth
from .api.combined import Combined
from .api.concepts import Concepts
from .api.entities import Entities
from .api.extract import Extract
from .api.hashtags import Hashtags
from .api.images import ImageTags
from .api.language import Language
from .api.microformats import Microformats
from .api.rate_limits import RateLimits
from .api.related import Related
from .api.sentiment import Sentiment
from .api.summarize import Summarize
from .config import service_config


class TextAPI:
    """
    Main API client to interact with all Text API endpoints.

    Every endpoint shares one HTTP session and one rate-limit snapshot,
    available as `rate_limits` after each successful call.
    Credentials fall back to TEXTAPI_APPLICATION_ID / TEXTAPI_APPLICATION_KEY.
    """
    def __init__(self, application_id: str = None, application_key: str = None,
                 use_https: bool = None, timeout: float = None, host: str = None,
                 base_path: str = None, http_client: httpx.Client = None):
        auth = Auth(
            application_id=application_id or service_config.APPLICATION_ID,
            application_key=application_key or service_config.APPLICATION_KEY,
        )
        auth.validate_credentials()
        self.auth = auth
        self.use_https = service_config.USE_HTTPS if use_https is None else use_https
        timeout = timeout if timeout else service_config.TIMEOUT

        self.rate_limits = RateLimits()
        self._owns_client = http_client is None
        self.client = http_client if http_client is not None else httpx.Client(timeout=timeout)

        shared = dict(
            use_https=self.use_https,
            host=host,
            base_path=base_path,
            timeout=timeout,
            rate_limits=self.rate_limits,
            http_client=self.client,
        )
        self.classify = Classification(auth, **shared)
        self.combined = Combined(auth, **shared)
        self.concepts = Concepts(auth, **shared)
        self.entities = Entities(auth, **shared)
        self.extract = Extract(auth, **shared)
        self.hashtags = Hashtags(auth, **shared)
        self.image_tags = ImageTags(auth, **shared)
        self.language = Language(auth, **shared)
        self.microformats = Microformats(auth, **shared)
        self.related = Related(auth, **shared)
        self.sentiment = Sentiment(auth, **shared)
        self.summarize = Summarize(auth, **shared)

    def classify_by_taxonomy(self, *args, **kwargs):
        return self.classify.by_taxonomy(*args, **kwargs)

    def unsupervised_classify(self, *args, **kwargs):
        return self.classify.unsupervised(*args, **kwargs)

    def close(self):
        if self._owns_client:
            self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
