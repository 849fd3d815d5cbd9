"""Domain layer: plate matching rules, entities and collaborator interfaces."""
