"""External system integrations for neo-dualwrite."""
