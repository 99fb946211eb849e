"""Settings, logging and middleware shared by the API."""
