"""Adapters binding copy ports to concrete infrastructure."""
