"""Core domain logic: legal knowledge matching, session lifecycle, exceptions."""
