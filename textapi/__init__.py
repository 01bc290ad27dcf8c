from .main import TextAPI
from .api import *
from .version import __version__
