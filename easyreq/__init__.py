"""Value types for HTTP requests: URLs, headers, credentials, options, callbacks, multipart parts and header parsing."""

__version__ = "0.1.0"
__all__ = ["types", "auth", "options", "callback", "multipart", "util"]