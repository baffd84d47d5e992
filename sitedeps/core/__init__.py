"""Core configuration, exceptions and utilities for sitedeps."""
