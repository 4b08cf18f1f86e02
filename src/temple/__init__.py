"""temple -- pick a template file from your catalog and drop it into the current directory."""

import logging

__version__ = '0.3.0'

# Silent unless --debug attaches a file handler.
logging.getLogger('temple').addHandler(logging.NullHandler())
