"""Domain layer: calendar helpers, chart data models and sample data."""
