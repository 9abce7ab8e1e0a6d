"""Small, dependency-free helpers shared by the command modules."""
