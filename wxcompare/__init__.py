"""Weather comparison store: hourly ingestion plus range and availability queries."""
