"""CRM task domain."""
