"""Instrumentation and tracking engine."""
