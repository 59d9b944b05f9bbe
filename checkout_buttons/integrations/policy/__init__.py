"""Normalisation of untrusted payloads into contract types."""
