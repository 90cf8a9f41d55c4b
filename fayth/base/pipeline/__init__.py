"""Request pipeline: middleware chain over a terminal executor."""

from .httpx_executor import HttpxExecutor
from .pipeline import Pipeline
from .standard import base_url, bearer_auth, default_headers, organization_header, project_header
from .types import Executor, Middleware

__all__ = [
    "Executor",
    "Middleware",
    "Pipeline",
    "HttpxExecutor",
    "bearer_auth",
    "organization_header",
    "project_header",
    "default_headers",
    "base_url",
]
