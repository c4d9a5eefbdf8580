"""Pydantic v2 schemas for presentation-facing payloads."""
