"""Version information for datelog.

setup.py reads __version__ from this file, so bump it here only.
"""

__version__ = "1.0.0"
__app_name__ = "datelog"

VERSION = __version__
