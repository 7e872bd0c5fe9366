"""Shared utilities for charter2pdf."""
