"""Git repository-state commands."""
