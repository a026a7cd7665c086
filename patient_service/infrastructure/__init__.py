"""Infrastructure — database session management, storage implementation, logging setup."""
