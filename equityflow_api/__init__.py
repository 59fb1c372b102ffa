"""GraphQL pricing service for equity cash flows."""
