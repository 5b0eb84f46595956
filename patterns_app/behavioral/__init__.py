"""Behavioral patterns: Observer, Strategy."""
