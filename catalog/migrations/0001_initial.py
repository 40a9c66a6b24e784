# Generated manually for the initial catalog schema

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


def _localized_fields():
    return [
        ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
        ('locale', models.CharField(blank=True, db_index=True, default='', help_text='Locale this entry was authored in', max_length=16)),
        ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
        ('updated_at', models.DateTimeField(auto_now=True)),
    ]


def _shared_fields():
    return [
        ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
        ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
        ('updated_at', models.DateTimeField(auto_now=True)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Locale',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('code', models.CharField(help_text="Locale code used in frontend URLs, e.g. 'en'", max_length=16, unique=True)),
                ('name', models.CharField(blank=True, help_text="Human-readable name, e.g. 'English'", max_length=64)),
                ('is_default', models.BooleanField(default=False, help_text='Whether this is the default locale of the site')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name': 'Locale',
                'verbose_name_plural': 'Locales',
                'db_table': 'catalog_locale',
                'ordering': ['-is_default', 'code'],
            },
        ),
        migrations.CreateModel(
            name='Brand',
            fields=_localized_fields() + [
                ('name', models.CharField(max_length=200)),
                ('slug', models.SlugField(blank=True, help_text='URL segment of the brand page; leave empty for unpublished brands', max_length=200)),
                ('description', models.TextField(blank=True)),
            ],
            options={
                'verbose_name': 'Brand',
                'verbose_name_plural': 'Brands',
                'db_table': 'catalog_brand',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='ProductCategory',
            fields=_localized_fields() + [
                ('name', models.CharField(max_length=200)),
            ],
            options={
                'verbose_name': 'Product Category',
                'verbose_name_plural': 'Product Categories',
                'db_table': 'catalog_product_category',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='ProductType',
            fields=_localized_fields() + [
                ('name', models.CharField(max_length=200)),
            ],
            options={
                'verbose_name': 'Product Type',
                'verbose_name_plural': 'Product Types',
                'db_table': 'catalog_product_type',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Color',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('hex_code', models.CharField(blank=True, help_text="Swatch color, e.g. '#1a1a1a'", max_length=7)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Color',
                'verbose_name_plural': 'Colors',
                'db_table': 'catalog_color',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='HardwareItem',
            fields=_shared_fields() + [
                ('name', models.CharField(max_length=200)),
            ],
            options={
                'verbose_name': 'Hardware Item',
                'verbose_name_plural': 'Hardware Items',
                'db_table': 'catalog_hardware_item',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Product',
            fields=_localized_fields() + [
                ('name', models.CharField(max_length=200)),
                ('slug', models.SlugField(blank=True, help_text='URL segment of the product page; leave empty for unpublished products', max_length=200)),
                ('description', models.TextField(blank=True)),
                ('brand', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='products', to='catalog.brand')),
                ('category', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='products', to='catalog.productcategory')),
                ('product_type', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='products', to='catalog.producttype')),
                ('colors', models.ManyToManyField(blank=True, related_name='products', to='catalog.color')),
                ('hardware_items', models.ManyToManyField(blank=True, related_name='products', to='catalog.hardwareitem')),
            ],
            options={
                'verbose_name': 'Product',
                'verbose_name_plural': 'Products',
                'db_table': 'catalog_product',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='CaseStudy',
            fields=_localized_fields() + [
                ('title', models.CharField(max_length=200)),
                ('slug', models.SlugField(blank=True, max_length=200)),
                ('body', models.TextField(blank=True)),
            ],
            options={
                'verbose_name': 'Case Study',
                'verbose_name_plural': 'Case Studies',
                'db_table': 'catalog_case_study',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Accessory',
            fields=_localized_fields() + [
                ('name', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
            ],
            options={
                'verbose_name': 'Accessory',
                'verbose_name_plural': 'Accessories',
                'db_table': 'catalog_accessory',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Glasses',
            fields=_localized_fields() + [
                ('name', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
            ],
            options={
                'verbose_name': 'Glasses',
                'verbose_name_plural': 'Glasses',
                'db_table': 'catalog_glasses',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Gallery',
            fields=_shared_fields() + [
                ('title', models.CharField(max_length=200)),
                ('caption', models.TextField(blank=True)),
            ],
            options={
                'verbose_name': 'Gallery',
                'verbose_name_plural': 'Galleries',
                'db_table': 'catalog_gallery',
                'ordering': ['-created_at'],
            },
        ),
    ]
