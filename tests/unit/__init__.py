"""Unit tests, one module per ``minimalpack`` module."""
