"""Hypertext rendering for plain-text protocol specifications."""
