"""
Settings entry point for catalog_server.

ENVIRONMENT selects which settings module is loaded; everything else is
read from environment variables or the .env file.
"""
from decouple import config

ENVIRONMENT = config('ENVIRONMENT', default='development')

if ENVIRONMENT == 'production':
    from .production import *
elif ENVIRONMENT == 'test':
    from .test import *
else:
    from .development import *
