"""
Application configuration (env, settings, constants).

Responsibility: Centralize config loading, environment variables, and app-wide
constants. Keeps the rest of the app decoupled from how config is sourced.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Retrieval augmentor service (from env). Empty URL means retrieval is not configured.
RETRIEVER_URL: str = os.getenv("RETRIEVER_URL", "").strip()
RETRIEVER_API_KEY: str = os.getenv("RETRIEVER_API_KEY", "").strip()

# API timeouts (seconds)
RETRIEVER_API_TIMEOUT: float = 30.0
