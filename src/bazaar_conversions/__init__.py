"""Build bazaar-conversions.json: bazaar product id -> display name."""
