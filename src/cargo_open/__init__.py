"""Open an installed crate's source directory in your editor."""
