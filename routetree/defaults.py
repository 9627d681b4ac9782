"""
RouteTree Default Values
All hardcoded values should be defined here and accessed via Config.get()
These defaults can be overridden by a config/routetree.py module or at runtime
"""

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

DEFAULT_LOCALES = ['de', 'en']
DEFAULT_LOCALE = 'de'

# Prefix every generated uri with its locale (e.g. 'de/photos')
DEFAULT_LOCALE_PREFIX = True

# ============================================================================
# URL DEFAULTS
# ============================================================================

DEFAULT_ABSOLUTE_URLS = True
DEFAULT_ROOT_URL = 'http://localhost'

# ============================================================================
# TRANSLATION DEFAULTS
# ============================================================================

# Translation keys for node titles are looked up below this prefix,
# e.g. 'pages.user.comment.title'
DEFAULT_LANG_PREFIX = 'pages'

# ============================================================================
# REDIRECT DEFAULTS
# ============================================================================

DEFAULT_REDIRECT_STATUS = 302

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_CHANNELS = ['routetree']

# ============================================================================
# MIDDLEWARE DEFAULTS
# ============================================================================

# Route middleware by name, e.g. {'auth': 'app.middleware.AuthMiddleware'}
DEFAULT_ROUTE_MIDDLEWARE = {}
