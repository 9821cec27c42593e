"""URL Shortener Service package."""
