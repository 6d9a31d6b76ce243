"""Activity notification records: classification, targeting and cache repair."""
