from pathlib import Path
from dotenv import load_dotenv
import os

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")



SECRET_KEY = os.getenv('SECRET_KEY', 'change-me-in-production')
DEBUG = os.getenv('DEBUG', 'True') == 'True'

ALLOWED_HOSTS = ['*']

INSTALLED_APPS = [
    'jazzmin',
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    # 3rd party
    'rest_framework',
    'corsheaders',
    # local apps
    'teams',
    'matches',
    'content',
    'cms',
    'website',
]

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'almaviseu.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
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

WSGI_APPLICATION = 'almaviseu.wsgi.application'

# MySQL en production, SQLite possible via DB_ENGINE=django.db.backends.sqlite3
DB_ENGINE = os.getenv('DB_ENGINE', 'django.db.backends.mysql')

if DB_ENGINE.endswith('sqlite3'):
    DATABASES = {
        'default': {
            'ENGINE': DB_ENGINE,
            'NAME': os.getenv('DB_NAME', str(BASE_DIR / 'db.sqlite3')),
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': DB_ENGINE,
            'NAME': os.getenv('DB_NAME', 'almaviseu_db'),
            'USER': os.getenv('DB_USER', 'Admin'),
            'PASSWORD': os.getenv('DB_PASSWORD', 'Admin'),
            'HOST': os.getenv('DB_HOST', '127.0.0.1'),
            'PORT': os.getenv('DB_PORT', '3306'),
            'OPTIONS': {'charset': 'utf8mb4'},
        }
    }


AUTH_PASSWORD_VALIDATORS = [
    {'NAME':'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME':'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME':'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME':'django.contrib.auth.password_validation.NumericPasswordValidator'},
]

LANGUAGE_CODE = 'pt-pt'
TIME_ZONE = 'Europe/Lisbon'
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

MEDIA_URL = '/media/'
MEDIA_ROOT = BASE_DIR / 'media'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LOGIN_URL = 'admin:login'

# Contenu du site
SITE_NAME = os.getenv('SITE_NAME', 'ALMA Viseu')
SITE_CURRENCY = os.getenv('SITE_CURRENCY', '€')
UPLOADS_DIR = os.getenv('UPLOADS_DIR', 'uploads')
# nombre de cartes affichées dans "Próximos Jogos" / "Resultados"
CALENDAR_LIMIT = int(os.getenv('CALENDAR_LIMIT', '10'))

REST_FRAMEWORK = {
    'DEFAULT_PAGINATION_CLASS': None,
}

# CORS
CORS_ALLOW_ALL_ORIGINS = False
origins = os.getenv('ALLOWED_ORIGINS', 'http://localhost:5173,http://127.0.0.1:5173')
CORS_ALLOWED_ORIGINS = [o.strip() for o in origins.split(',') if o.strip()]


from datetime import timedelta
SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(hours=6),
    "REFRESH_TOKEN_LIFETIME": timedelta(days=7),
    "AUTH_HEADER_TYPES": ("Bearer",),
}

REST_FRAMEWORK.update({
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "rest_framework.authentication.SessionAuthentication",
        "rest_framework_simplejwt.authentication.JWTAuthentication",
    ),
})


LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    },
    "root": {"handlers": ["console"], "level": LOG_LEVEL},
    "loggers": {
        # moins de bruit côté ORM
        "django.db.backends": {"level": "WARNING"},
    },
}


JAZZMIN_SETTINGS = {
    "site_title": "ALMA Viseu",
    "site_header": "ALMA Viseu",
    "site_brand": "ALMA Voleibol",
    "welcome_sign": "Painel de administração",
    "copyright": "ALMA Viseu",

    # Menu du haut (liens rapides)
    "topmenu_links": [
        {"name": "Início", "url": "admin:index", "permissions": ["auth.view_user"]},
        {"app": "content"},
        {"app": "matches"},
        {"app": "teams"},
        # gestion rapide du contenu (voir cms.admin_views)
        {"name": "Gestão de conteúdos", "url": "cms_index"},
        {"name": "Ver site", "url": "website:home", "new_window": True},
    ],

    "order_with_respect_to": [
        "auth", "content", "matches", "teams"
    ],

    # Icônes FontAwesome (fa)
    "icons": {
        "auth": "fas fa-shield-alt",
        "auth.Group": "fas fa-users-cog",
        "auth.User": "fas fa-user",
        "content": "fas fa-newspaper",
        "content.NewsItem": "fas fa-newspaper",
        "content.Product": "fas fa-shopping-bag",
        "content.Partner": "fas fa-handshake",
        "content.GalleryItem": "fas fa-images",
        "content.OrganizationMember": "fas fa-id-badge",
        "content.SiteContent": "fas fa-paint-brush",
        "matches": "fas fa-volleyball-ball",
        "matches.Match": "fas fa-calendar-check",
        "teams": "fas fa-users",
        "teams.Team": "fas fa-shield",
        "teams.TeamMember": "fas fa-user",
    },

    "show_ui_builder": False,
    "changeform_format": "horizontal_tabs",
    "related_modal_active": True,
    "show_sidebar": True,
}

JAZZMIN_UI_TWEAKS = {
    "theme": "darkly",
    "dark_mode_theme": None,
    "navbar": "navbar-dark",
    "sidebar": "sidebar-dark-warning",
    "brand_colour": "navbar-warning",
    "accent": "accent-warning",
    "fixed_sidebar": True,
    "sidebar_nav_small_text": False,
    "sidebar_nav_flat_style": False,
    "login_logo": None,
}
