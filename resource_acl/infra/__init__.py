"""Infrastructure concerns shared by the package entrypoints."""
