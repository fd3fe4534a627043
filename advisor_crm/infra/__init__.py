"""Process-level infrastructure helpers."""
