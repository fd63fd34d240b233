"""Shared utilities for LupaSearch."""
