"""Vimania API: link parsing, target classification and dispatch."""
