"""API module - HTTP endpoints.

This module contains API routers organized by version (v1, v2, etc.).
Each version is independently versioned to support API evolution.
"""
