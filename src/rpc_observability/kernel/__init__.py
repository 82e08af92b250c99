"""Kernel – error hierarchy and time source shared by every layer."""
