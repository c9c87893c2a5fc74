"""Core wiki components: storage, templating, and routing."""
