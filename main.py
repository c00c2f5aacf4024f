"""WSGI entrypoint for The Cook Book.

The Flask development server is intentionally not started from this module so
that deployments rely on Gunicorn (see ``gunicorn.conf.py`` for the bind
port). Local development can still use ``flask --app main run`` which imports
the ``app`` object defined below.
"""

import logging

from cookbook import create_app
from cookbook.config import Settings

settings = Settings.from_env()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app(settings=settings)


__all__ = ["app"]
