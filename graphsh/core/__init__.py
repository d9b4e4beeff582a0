"""Core subsystem for graphsh (paths, configuration, engine contracts, errors)."""
