"""
Pytest configuration and shared fixtures.

Provides:
- Revalidation settings pointing at a fake frontend, reset around each test
- mock_post: patched requests.post returning a 200 JSON response
- locales: 'en' (default) and 'fr' rows in the Locale table
"""

from unittest import mock

import pytest

from revalidation.service import reset_revalidation_service
from tests.utils import make_response

FRONTEND_URL = 'https://frontend.test'
SECRET = 's3cret'


@pytest.fixture(autouse=True)
def revalidation_settings(settings):
    settings.FRONTEND_URL = FRONTEND_URL
    settings.REVALIDATE_SECRET = SECRET
    settings.REVALIDATE_TIMEOUT = 30
    settings.REVALIDATION_DEFAULT_LOCALE = 'en'
    reset_revalidation_service()
    yield settings
    reset_revalidation_service()


@pytest.fixture
def mock_post():
    with mock.patch('revalidation.service.requests.post') as post:
        post.return_value = make_response(200, {'revalidated': True})
        yield post


@pytest.fixture
def locales(db):
    from catalog.models import Locale

    Locale.objects.create(code='en', name='English', is_default=True)
    Locale.objects.create(code='fr', name='French')
    return ['en', 'fr']
