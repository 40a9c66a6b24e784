from types import SimpleNamespace

import pytest
from django.db import transaction

from catalog.models import Locale
from revalidation.locales import get_available_locales


@pytest.mark.django_db
def test_locales_come_from_the_locale_table_default_first(locales):
    assert get_available_locales() == ['en', 'fr']


@pytest.mark.django_db
def test_empty_locale_table_is_not_a_failure():
    assert get_available_locales() == []


def test_provider_failure_falls_back_to_default_locale(caplog):
    def broken():
        raise RuntimeError('i18n plugin missing')

    assert get_available_locales(broken) == ['en']
    assert 'Error fetching locales' in caplog.text


def test_fallback_uses_configured_default(settings):
    settings.REVALIDATION_DEFAULT_LOCALE = 'fr'

    assert get_available_locales(lambda: 1 / 0) == ['fr']


def test_unimportable_provider_falls_back(settings):
    settings.REVALIDATION_LOCALE_PROVIDER = 'catalog.locales.does_not_exist'

    assert get_available_locales() == ['en']


def test_provider_records_only_contribute_their_code():
    records = [{'code': 'en', 'name': 'English'}, SimpleNamespace(code='it', name='Italiano')]

    assert get_available_locales(lambda: records) == ['en', 'it']


@pytest.mark.parametrize('result', ['en', b'en', {'code': 'en'}])
def test_provider_must_return_a_list(settings, result):
    settings.REVALIDATION_DEFAULT_LOCALE = 'de'

    assert get_available_locales(lambda: result) == ['de']


@pytest.mark.django_db
def test_failed_lookup_leaves_the_callers_transaction_usable(locales):
    def broken_query():
        return [row.code for row in Locale.objects.raw('SELECT * FROM no_such_locale_table')]

    with transaction.atomic():
        assert get_available_locales(broken_query) == ['en']
        assert Locale.objects.count() == 2
