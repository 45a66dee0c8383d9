"""USD serialization for materials."""
