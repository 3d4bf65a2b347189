"""Django test settings for Masjid Network."""
from .development import *  # noqa: F401, F403

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

REST_FRAMEWORK = {
    **REST_FRAMEWORK,  # noqa: F405
    'DEFAULT_THROTTLE_CLASSES': [],
}

STRIPE_WEBHOOK_SECRET = ''

LOGGING['loggers']['apps']['level'] = 'WARNING'  # noqa: F405
# Let pytest's caplog handler on the root logger see app records
LOGGING['loggers']['apps']['propagate'] = True  # noqa: F405
