"""Greeting module - hello and sum endpoints."""

from .router import router, greet, parse_int


__all__ = ["router", "greet", "parse_int"]
