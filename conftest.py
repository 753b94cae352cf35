"""
Shared pytest setup for the token indexer.

Settings are read once at import time, so the test env file must be
selected before anything under app/ is imported.
"""

import os

# env.test disables the standalone metrics server and sets LOG_LEVEL=DEBUG
os.environ["ENV_FILE"] = os.path.join(os.path.dirname(__file__), "env.test")
