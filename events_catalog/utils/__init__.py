"""Utility helpers for the events catalog."""
