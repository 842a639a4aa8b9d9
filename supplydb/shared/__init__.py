"""Shared building blocks used by the batch entry point and scripts."""
