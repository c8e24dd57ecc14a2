"""Domain layer: graph model, puzzle types, exceptions."""
