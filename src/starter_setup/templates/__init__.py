"""Jinja2 templates rendered by the setup wizard."""
