"""Task model, checklist codec, in-memory store and checklist file handle."""
