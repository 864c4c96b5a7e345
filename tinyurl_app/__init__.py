"""TinyURL: URL shortener with click analytics."""
