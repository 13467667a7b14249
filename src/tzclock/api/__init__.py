"""HTTP routes and error mapping for the time service."""
