"""log-analyzer — in-memory log store with pipe-delimited file persistence."""
