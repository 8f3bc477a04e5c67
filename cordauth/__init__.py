"""
Discord OAuth2 Support
~~~~~~~~~~~~~~~~~~~~~~

Request bodies, response models and authorization URLs for Discord's OAuth2 API.

:copyright: (c) 2025 Mahirox36
:license: MIT, see LICENSE for more details.
"""

__title__ = "cordauth"
__author__ = "Mahirox36"
__license__ = "MIT"
__version__ = "0.1.0"

import logging

from .config import *
from .enums import *
from .errors import *
from .OAuth2 import *
from .scope import *

logging.getLogger(__name__).addHandler(logging.NullHandler())
