"""Configuration, reporting and progress helpers shared by lot renamer tools."""
