"""
Django settings for storefront project.

This configuration supports both development and production environments.
Sensitive settings are loaded from environment variables.
"""

import os
from pathlib import Path
from dotenv import load_dotenv
import dj_database_url

# Load environment variables from .env file
load_dotenv()

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# Ensure the logs directory exists
LOGS_DIR = BASE_DIR / 'logs'
LOGS_DIR.mkdir(exist_ok=True)


# =============================================================================
# CORE DJANGO SETTINGS
# =============================================================================

SECRET_KEY = os.getenv('SECRET_KEY', 'django-insecure-development-key')
DEBUG = os.getenv('DEBUG', 'True').lower() in ['true', '1', 'yes']
ALLOWED_HOSTS = os.getenv('ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')


# =============================================================================
# APPLICATION DEFINITION
# =============================================================================

DJANGO_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
]

LOCAL_APPS = [
    'catalog',
    'revalidation',
]

INSTALLED_APPS = DJANGO_APPS + LOCAL_APPS


# =============================================================================
# MIDDLEWARE CONFIGURATION
# =============================================================================

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'storefront.urls'


# =============================================================================
# TEMPLATE CONFIGURATION
# =============================================================================

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'storefront.wsgi.application'


# =============================================================================
# DATABASE CONFIGURATION
# =============================================================================

# Determine database type and construct URL dynamically
DB_TYPE = os.getenv('DB_TYPE', 'sqlite').lower()

if DB_TYPE in ['postgres', 'postgresql']:
    PG_HOST = os.getenv('POSTGRES_HOST', 'localhost')
    PG_PORT = os.getenv('POSTGRES_PORT', '5432')
    PG_DB = os.getenv('POSTGRES_DB', 'storefront')
    PG_USER = os.getenv('POSTGRES_USER', 'storefront')
    PG_PASS = os.getenv('POSTGRES_PASSWORD', '')

    DATABASE_URL = f"postgresql://{PG_USER}:{PG_PASS}@{PG_HOST}:{PG_PORT}/{PG_DB}"
else:
    # SQLite configuration (default)
    SQLITE_PATH = os.getenv('SQLITE_PATH', str(BASE_DIR / 'db.sqlite3'))
    DATABASE_URL = f"sqlite:///{SQLITE_PATH}"

# Use dj-database-url to parse the constructed URL
DATABASES = {'default': dj_database_url.config(default=DATABASE_URL)}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# =============================================================================
# INTERNATIONALIZATION
# =============================================================================

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True


# =============================================================================
# STATIC FILES CONFIGURATION
# =============================================================================

STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {'verbose': {'format': '%(levelname)s %(asctime)s %(module)s %(message)s'}},
    'handlers': {
        'console': {'class': 'logging.StreamHandler'},
        'file': {
            'level': 'INFO',
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': LOGS_DIR / 'storefront.log',
            'maxBytes': 1024 * 1024 * 5,
            'backupCount': 2,
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console', 'file'],
        'level': os.getenv('LOG_LEVEL', 'INFO'),
    },
}


# =============================================================================
# FRONTEND REVALIDATION (ISR) CONFIGURATION
# =============================================================================

# Base URL of the frontend; an empty value disables all revalidation calls
FRONTEND_URL = os.getenv('FRONTEND_URL', '')

# Shared secret sent as the x-revalidate-secret header
REVALIDATE_SECRET = os.getenv('REVALIDATE_SECRET') or None

# Request timeout in seconds; 0 or empty means wait for the frontend indefinitely
REVALIDATE_TIMEOUT = os.getenv('REVALIDATE_TIMEOUT', '30')

# Used when the locale table cannot be read
REVALIDATION_DEFAULT_LOCALE = os.getenv('REVALIDATION_DEFAULT_LOCALE', 'en')

REVALIDATION_LOCALE_PROVIDER = 'catalog.locales.active_locale_codes'

# Model label -> content type understood by revalidation.paths
REVALIDATION_TRACKED_MODELS = {
    'catalog.Product': 'product',
    'catalog.Brand': 'brand',
    'catalog.CaseStudy': 'case-study',
    'catalog.Accessory': 'accessory',
    'catalog.Gallery': 'gallery',
    'catalog.Glasses': 'glasses',
    # Components of other products; they have no page of their own
    'catalog.Color': 'color',
    'catalog.HardwareItem': 'hardware-item',
    'catalog.ProductCategory': 'product-category',
    'catalog.ProductType': 'product-type',
}
