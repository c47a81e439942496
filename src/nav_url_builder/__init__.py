"""Build URLs that open third-party navigation apps."""
