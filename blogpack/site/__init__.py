"""Page template and static site build."""
