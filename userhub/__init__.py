"""UserHub: user registration, authentication and profile management API."""

__version__ = "0.1.0"
