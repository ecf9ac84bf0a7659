"""Domain layer: collaborator contracts and domain exceptions."""
