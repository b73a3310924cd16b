"""Core server configuration: settings and constants."""
