"""Adapters – seams to collaborators outside callwire."""
