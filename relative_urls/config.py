import logging

# Handlers are left to the application
logging.getLogger('relative_urls').addHandler(logging.NullHandler())

# Default configuration
DEFAULT_CONFIG = {
    'ignore_protocol': True,         # Match http and https roots interchangeably
    'without_subdirectory': False,   # Strip the root's subdirectory from results
    'assets_only': False,            # Only convert URLs under the static image prefix
    'static_image_url_prefix': 'content/images',
}

HTTP_SCHEMES = ('http', 'https')
