"""Injection of parsed note properties into the corpus database."""
