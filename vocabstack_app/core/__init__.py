"""Core infrastructure: extensions, bootstrap, logging, errors and signals."""
