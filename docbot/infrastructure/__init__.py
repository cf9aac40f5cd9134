"""Infrastructure adapters: logging, filesystem, collectors and writers."""
