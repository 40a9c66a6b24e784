"""
Catalog content models for the storefront CMS.

Every model here is authored in the admin and rendered by the external
frontend. Changes are pushed to the frontend by the revalidation app, which
subscribes to these models through REVALIDATION_TRACKED_MODELS.
"""

from django.db import models
from django.utils import timezone


class Locale(models.Model):
    """
    A content locale served by the frontend (e.g. 'en', 'fr').

    This table is the source of the locale list used when building
    revalidation paths.
    """

    code = models.CharField(
        max_length=16,
        unique=True,
        help_text="Locale code used in frontend URLs, e.g. 'en'"
    )

    name = models.CharField(
        max_length=64,
        blank=True,
        help_text="Human-readable name, e.g. 'English'"
    )

    is_default = models.BooleanField(
        default=False,
        help_text="Whether this is the default locale of the site"
    )

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = "Locale"
        verbose_name_plural = "Locales"
        db_table = "catalog_locale"
        ordering = ['-is_default', 'code']

    def __str__(self):
        return self.code


class LocalizedContent(models.Model):
    """Abstract base for content authored per locale."""

    locale = models.CharField(
        max_length=16,
        blank=True,
        default='',
        db_index=True,
        help_text="Locale this entry was authored in"
    )

    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class Brand(LocalizedContent):
    name = models.CharField(max_length=200)
    slug = models.SlugField(
        max_length=200,
        blank=True,
        help_text="URL segment of the brand page; leave empty for unpublished brands"
    )
    description = models.TextField(blank=True)

    class Meta:
        verbose_name = "Brand"
        verbose_name_plural = "Brands"
        db_table = "catalog_brand"
        ordering = ['name']

    def __str__(self):
        return self.name


class ProductCategory(LocalizedContent):
    name = models.CharField(max_length=200)

    class Meta:
        verbose_name = "Product Category"
        verbose_name_plural = "Product Categories"
        db_table = "catalog_product_category"
        ordering = ['name']

    def __str__(self):
        return self.name


class ProductType(LocalizedContent):
    name = models.CharField(max_length=200)

    class Meta:
        verbose_name = "Product Type"
        verbose_name_plural = "Product Types"
        db_table = "catalog_product_type"
        ordering = ['name']

    def __str__(self):
        return self.name


class Color(models.Model):
    """A finish available on products. Shared by all locales."""

    name = models.CharField(max_length=100)
    hex_code = models.CharField(
        max_length=7,
        blank=True,
        help_text="Swatch color, e.g. '#1a1a1a'"
    )

    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Color"
        verbose_name_plural = "Colors"
        db_table = "catalog_color"
        ordering = ['name']

    def __str__(self):
        return self.name


class HardwareItem(models.Model):
    """A piece of hardware (handle, hinge, ...) used by products."""

    name = models.CharField(max_length=200)

    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Hardware Item"
        verbose_name_plural = "Hardware Items"
        db_table = "catalog_hardware_item"
        ordering = ['name']

    def __str__(self):
        return self.name


class Product(LocalizedContent):
    """
    A product with its own detail page on the frontend.

    Products reference colors, hardware items, categories and types; edits to
    those components affect every product page and the listings.
    """

    name = models.CharField(max_length=200)
    slug = models.SlugField(
        max_length=200,
        blank=True,
        help_text="URL segment of the product page; leave empty for unpublished products"
    )
    description = models.TextField(blank=True)

    brand = models.ForeignKey(
        Brand,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products'
    )
    category = models.ForeignKey(
        ProductCategory,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products'
    )
    product_type = models.ForeignKey(
        ProductType,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products'
    )
    colors = models.ManyToManyField(Color, blank=True, related_name='products')
    hardware_items = models.ManyToManyField(HardwareItem, blank=True, related_name='products')

    class Meta:
        verbose_name = "Product"
        verbose_name_plural = "Products"
        db_table = "catalog_product"
        ordering = ['name']

    def __str__(self):
        return self.name


class CaseStudy(LocalizedContent):
    """A finished work shown in the frontend's portfolio."""

    title = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200, blank=True)
    body = models.TextField(blank=True)

    class Meta:
        verbose_name = "Case Study"
        verbose_name_plural = "Case Studies"
        db_table = "catalog_case_study"
        ordering = ['-created_at']

    def __str__(self):
        return self.title


class Accessory(LocalizedContent):
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    class Meta:
        verbose_name = "Accessory"
        verbose_name_plural = "Accessories"
        db_table = "catalog_accessory"
        ordering = ['name']

    def __str__(self):
        return self.name


class Glasses(LocalizedContent):
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    class Meta:
        verbose_name = "Glasses"
        verbose_name_plural = "Glasses"
        db_table = "catalog_glasses"
        ordering = ['name']

    def __str__(self):
        return self.name


class Gallery(models.Model):
    """A gallery image set. Shared by all locales."""

    title = models.CharField(max_length=200)
    caption = models.TextField(blank=True)

    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Gallery"
        verbose_name_plural = "Galleries"
        db_table = "catalog_gallery"
        ordering = ['-created_at']

    def __str__(self):
        return self.title
