"""Kernel – error hierarchy shared by every callwire layer."""
