"""Storage and cache adapters for the notification domain."""
