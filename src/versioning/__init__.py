"""Lookup models, identifier parsing and version ordering."""
