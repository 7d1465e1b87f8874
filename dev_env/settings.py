import os
from pathlib import Path

import dj_database_url
from dotenv import load_dotenv

BASE_DIR = Path(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

load_dotenv(BASE_DIR.joinpath('.env'))

SECRET_KEY = os.getenv('SECRET_KEY')
if not SECRET_KEY:
    SECRET_KEY = 'djangobilldocs1234!DoNotUse!BadIdea!VeryInsecure!'
DEBUG = os.getenv('DEBUG', 'true').lower() in ('1', 'true', 'yes')

PORT = int(os.getenv('PORT', 5002))

ALLOWED_HOSTS = ['127.0.0.1', 'localhost', 'testserver'] + [
    h for h in os.getenv('ALLOWED_HOSTS', '').split(',') if h
]

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'corsheaders',
    'django_billdocs',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'corsheaders.middleware.CorsMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'dev_env.urls'

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

WSGI_APPLICATION = 'dev_env.wsgi.application'

# Database
# https://docs.djangoproject.com/en/4.1/ref/settings/#databases

DATABASES = {
    'default': dj_database_url.config(
        default=f'sqlite:///{BASE_DIR.joinpath("db.sqlite3")}',
        conn_max_age=600
    )
}

# CORS
CORS_ALLOWED_ORIGINS = [
    o for o in (os.getenv('CORS_ORIGIN'), os.getenv('FRONTEND_URL')) if o
] or ['http://localhost:3000']
CORS_ALLOW_CREDENTIALS = True
CORS_EXPOSE_HEADERS = [
    'Content-Disposition',
    'X-BillDocs-Render-Mode',
    'X-BillDocs-Omitted-Items',
]

# Internationalization
# https://docs.djangoproject.com/en/4.1/topics/i18n/

LANGUAGE_CODE = 'en-us'

USE_TZ = True
TIME_ZONE = os.getenv('TIME_ZONE', 'UTC')

USE_I18N = True

STATIC_URL = '/static/'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{asctime} {levelname} {name}: {message}',
            'style': '{',
        }
    },
    'handlers': {
        'console': {
            'level': 'INFO',
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        }
    },
    'loggers': {
        'Django BillDocs Logger': {
            'level': 'INFO',
            'handlers': ['console'],
            'propagate': False,
        }
    }
}

DJANGO_BILLDOCS_PDF_CONVERSION_TIMEOUT = int(os.getenv('PDF_CONVERSION_TIMEOUT', 60))
DJANGO_BILLDOCS_SOFFICE_BINARY = os.getenv('SOFFICE_BINARY', 'soffice')
