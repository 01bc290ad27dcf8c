from .client_base import Auth, BaseClient
from .classification import Classification
from .combined import Combined
from .concepts import Concepts
from .entities import Entities
from .errors import CredentialsError, InvalidResponseError, ParameterError, RemoteError, TextAPIError
from .extract import Extract
from .hashtags import Hashtags
from .images import ImageTags
from .language import Language
from .microformats import Microformats
from . import models
from .models import *
from .rate_limits import RateLimits, RateLimitSnapshot
from .related import Related
from .sentiment import Sentiment
from .summarize import Summarize

__all__ = [
    "Auth", "BaseClient", "RateLimits", "RateLimitSnapshot",
    "Classification", "Combined", "Concepts", "Entities", "Extract", "Hashtags",
    "ImageTags", "Language", "Microformats", "Related", "Sentiment", "Summarize",
    "TextAPIError", "CredentialsError", "ParameterError", "RemoteError", "InvalidResponseError",
    "models",
] + models.__all__
