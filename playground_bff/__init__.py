"""GraphQL backend for frontend serving the product catalog."""
