"""Parsers turning raw command text into commands."""
