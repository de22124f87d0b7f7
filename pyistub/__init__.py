"""Generate Python typing stub files from collected type metadata."""

__version__ = "0.11.2"