"""Feature packages for neo-dualwrite."""
