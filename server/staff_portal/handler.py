"""AWS Lambda entry point.

Settings are read once per container, at cold start; a missing
``DATABASE_URL`` fails the cold start with ``ConfigError``. Mangum translates
API Gateway events into ASGI requests for the application.
"""

from mangum import Mangum

from staff_portal.core.config import load_settings
from staff_portal.core.logs import configure_logging
from staff_portal.main import create_app

settings = load_settings()
configure_logging(settings.LOG_LEVEL)

# lifespan="off": Lambda owns the container lifecycle
handler = Mangum(create_app(settings), lifespan="off")
