from .base import *  # noqa: F401,F403


DEBUG = True

if not SECRET_KEY:  # noqa: F405
    SECRET_KEY = "dev-only-insecure-key"

ALLOWED_HOSTS = ["*"]
