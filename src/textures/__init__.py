"""Texture loading: asset paths, GL upload and placeholder generation."""
