"""Task tracker application package."""
