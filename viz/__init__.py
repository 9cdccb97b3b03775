"""Plotting helpers for the forward exchange calculator."""
