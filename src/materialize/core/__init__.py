"""Host-agnostic materialize logic."""
