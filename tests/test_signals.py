import pytest
import requests
from django.db import connection, transaction

from catalog.models import (
    Accessory, Brand, CaseStudy, Color, Gallery, Glasses, HardwareItem,
    Product, ProductCategory, ProductType,
)
from revalidation.service import reset_revalidation_service
from revalidation.signals import handle_save
from tests.utils import make_response, sent_payload

# Delivery waits for the commit, so these tests need real transactions
pytestmark = pytest.mark.django_db(transaction=True)


def test_product_create_revalidates_detail_and_listing(locales, mock_post):
    product = Product.objects.create(name='Chair', slug='chair-1', locale='en')

    assert sent_payload(mock_post) == {
        'paths': ['/en/product/chair-1', '/fr/product/chair-1', '/en/product', '/fr/product'],
        'entityType': 'product',
        'entityId': product.pk,
        'locale': 'en',
    }


def test_product_update_sends_one_request(locales, mock_post):
    product = Product.objects.create(name='Chair', slug='chair-1')
    mock_post.reset_mock()

    product.slug = 'chair-2'
    product.save()

    assert '/en/product/chair-2' in sent_payload(mock_post)['paths']


def test_product_delete_uses_last_known_state(locales, mock_post):
    product = Product.objects.create(name='Chair', slug='chair-1')
    product_id = product.pk
    mock_post.reset_mock()

    product.delete()

    payload = sent_payload(mock_post)
    assert payload['entityId'] == product_id
    assert '/fr/product/chair-1' in payload['paths']
    assert not Product.objects.exists()


def test_product_without_slug_sends_nothing(locales, mock_post):
    Product.objects.create(name='Draft')

    mock_post.assert_not_called()


def test_brand_revalidates_detail_only(locales, mock_post):
    Brand.objects.create(name='Acme', slug='acme')

    assert sent_payload(mock_post)['paths'] == ['/en/brand/acme', '/fr/brand/acme']


def test_case_study_revalidates_finished_works(locales, mock_post):
    CaseStudy.objects.create(title='Loft', slug='loft', locale='fr')

    payload = sent_payload(mock_post)
    assert payload['entityType'] == 'case-study'
    assert payload['locale'] == 'fr'
    assert '/en/finished-works' in payload['paths']


@pytest.mark.parametrize('model, fields, expected', [
    (Accessory, {'name': 'Strap'}, ['/en/accessories', '/fr/accessories']),
    (Gallery, {'title': 'Showroom'}, ['/en/gallery', '/fr/gallery']),
    (Glasses, {'name': 'Aviator'}, ['/en/glasses', '/fr/glasses']),
])
def test_listing_types_revalidate_their_listing(locales, mock_post, model, fields, expected):
    model.objects.create(**fields)

    assert sent_payload(mock_post)['paths'] == expected


@pytest.mark.parametrize('model, entity_type', [
    (Color, 'color'),
    (HardwareItem, 'hardware-item'),
    (ProductCategory, 'product-category'),
    (ProductType, 'product-type'),
])
def test_component_types_revalidate_home_and_listing(locales, mock_post, model, entity_type):
    model.objects.create(name='Oak')

    payload = sent_payload(mock_post)
    assert payload['entityType'] == entity_type
    assert payload['paths'] == ['/en', '/en/product', '/fr', '/fr/product']


def test_locale_table_failure_falls_back_to_default(mock_post, settings):
    settings.REVALIDATION_LOCALE_PROVIDER = 'catalog.locales.missing'

    Color.objects.create(name='Black')

    assert sent_payload(mock_post)['paths'] == ['/en', '/en/product']


def test_no_frontend_url_means_no_requests(locales, mock_post, settings):
    settings.FRONTEND_URL = ''
    reset_revalidation_service()

    product = Product.objects.create(name='Chair', slug='chair-1')
    Brand.objects.create(name='Acme', slug='acme')
    Color.objects.create(name='Black')
    Gallery.objects.create(title='Showroom')
    product.delete()

    mock_post.assert_not_called()


def test_server_error_does_not_block_the_write(locales, mock_post, caplog):
    mock_post.return_value = make_response(500, text='Internal Server Error')

    Product.objects.create(name='Chair', slug='chair-1')

    assert Product.objects.filter(slug='chair-1').exists()
    assert 'Failed: 500' in caplog.text


def test_network_error_does_not_block_the_write(locales, mock_post):
    mock_post.side_effect = requests.Timeout('read timed out')

    brand = Brand.objects.create(name='Acme', slug='acme')
    brand.delete()

    assert mock_post.call_count == 2
    assert not Brand.objects.exists()


def test_fixture_loading_is_ignored(locales, mock_post):
    product = Product(name='Chair', slug='chair-1')

    handle_save(Product, product, created=True, raw=True)

    mock_post.assert_not_called()


def test_locale_rows_are_not_tracked(db, mock_post):
    from catalog.models import Locale

    Locale.objects.create(code='de')

    mock_post.assert_not_called()


def test_delivery_waits_for_the_commit(locales, mock_post):
    in_transaction = []

    def record_post(*args, **kwargs):
        in_transaction.append(connection.in_atomic_block)
        return make_response(200, {'revalidated': True})

    mock_post.side_effect = record_post

    with transaction.atomic():
        Product.objects.create(name='Chair', slug='chair-1')
        mock_post.assert_not_called()

    assert in_transaction == [False]


def test_rolled_back_write_sends_nothing(locales, mock_post):
    with pytest.raises(RuntimeError):
        with transaction.atomic():
            Product.objects.create(name='Chair', slug='chair-1')
            raise RuntimeError('abort')

    mock_post.assert_not_called()
    assert not Product.objects.exists()


def test_delete_without_slug_sends_nothing(locales, mock_post):
    brand = Brand.objects.create(name='Unpublished')

    brand.delete()

    mock_post.assert_not_called()
    assert not Brand.objects.exists()
