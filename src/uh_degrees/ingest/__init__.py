"""Dataset ingestion: read degree records from disk and validate them."""
