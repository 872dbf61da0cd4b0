"""
Core — Constants

Shared constants for pagination, sorting and uploaded images.

@file core/constants.py
"""

# ---------------------------------------------------------------------------
# Pagination & sorting
# ---------------------------------------------------------------------------

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

SORT_ASC = 'asc'
SORT_DESC = 'desc'
SORT_DIRECTIONS = (SORT_ASC, SORT_DESC)

UUID_PATTERN = r'[0-9a-fA-F]{8}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{12}'


# ---------------------------------------------------------------------------
# Images
# ---------------------------------------------------------------------------

ALLOWED_IMAGE_EXTENSIONS = ('.jpeg', '.jpg', '.png')
ALLOWED_IMAGE_CONTENT_TYPES = ('image/jpeg', 'image/jpg', 'image/png')
DEFAULT_IMAGE_MAX_BYTES = 50 * 1024 * 1024
