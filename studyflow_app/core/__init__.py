"""Core infrastructure: extensions, bootstrap, errors, signals."""
