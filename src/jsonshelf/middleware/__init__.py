"""Request/response middleware.

``CORSMiddleware`` is the only middleware jsonshelf installs; its
default ``PERMISSIVE_CORS`` policy opens every endpoint to any origin.
"""

from jsonshelf.middleware.cors import PERMISSIVE_CORS, CORSConfig, CORSMiddleware
from jsonshelf.middleware.protocol import Middleware, Next

__all__ = ["PERMISSIVE_CORS", "CORSConfig", "CORSMiddleware", "Middleware", "Next"]
