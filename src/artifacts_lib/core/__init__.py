# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for artifacts.

This module collects the foundational pieces used across the artifacts
codebase: configuration, error types, structured logging and the
filesystem gateway through which all archiving side effects flow.
"""
