"""Task tracker views."""
