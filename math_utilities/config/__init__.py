"""
Configuration loading and validation for library-wide policies.

Provides a strongly typed settings object read from environment variables,
with upfront validation and a lazily cached singleton.
"""
