"""Configuration model for build-tool-driven IDE project generation."""

__version__ = "0.1.0"
