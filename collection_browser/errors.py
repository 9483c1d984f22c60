# collection_browser/errors.py

class BrowserError(Exception):
    """Base class for all collection browser errors."""
    pass

class TransportError(BrowserError):
    """The remote collection could not be reached or answered with a failure status."""
    pass

class DecodeError(BrowserError):
    """The remote answered, but the payload did not have the expected shape."""
    pass

class ConfigError(BrowserError):
    """Error related to configuration."""
    pass
