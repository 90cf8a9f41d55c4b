"""fayth.config.defaults
=====================

Central place for small, stable default values used across the fayth
package. These defaults can be overridden through call options, but provide
sensible fallbacks for local development and tests.

Module Purpose
--------------
- Provide a single import location for conservative default constants (no I/O).
- Keep transport code free of magic literals.

This module avoids importing from other fayth packages to prevent circular
dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# ---- OpenAI chat completions ----

# Base URL used when no base URL call option is given. Trailing slash matters:
# relative request paths are resolved against it.
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1/"
# Relative path of the chat completions endpoint.
OPENAI_COMPLETIONS_PATH = "chat/completions"
OPENAI_PROVIDER_NAME = "openai"

# Header names for account scoping.
OPENAI_ORGANIZATION_HEADER = "OpenAI-Organization"
OPENAI_PROJECT_HEADER = "OpenAI-Project"

# ---- HTTP pool ----

# Pool purposes used by the terminal executor.
HTTP_POOL_PURPOSE_CHAT = "chat"

# ---- Fake model ----

FAKE_MODEL_DEFAULT_CHUNK_SIZE = 10
FAKE_MODEL_DEFAULT_CHUNK_DELAY_SECONDS = 0.1

__all__ = [
    "OPENAI_DEFAULT_BASE_URL",
    "OPENAI_COMPLETIONS_PATH",
    "OPENAI_PROVIDER_NAME",
    "OPENAI_ORGANIZATION_HEADER",
    "OPENAI_PROJECT_HEADER",
    "HTTP_POOL_PURPOSE_CHAT",
    "FAKE_MODEL_DEFAULT_CHUNK_SIZE",
    "FAKE_MODEL_DEFAULT_CHUNK_DELAY_SECONDS",
]
