import sys
from pathlib import Path

# Ensure repo root is on sys.path for Vercel serverless runtime
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from web.app import create_app
from web.config import Settings, configure_logging

settings = Settings.from_env()
configure_logging(settings.log_level)

app = create_app(settings)

# Vercel ASGI entrypoint
handler = app
