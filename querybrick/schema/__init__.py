"""Statement building blocks: conditions, clause records and raw SQL."""
