"""Infrastructure adapters: logging, filesystem, and the LRCLIB client."""
