"""User interfaces built on the bibfzf core."""
