"""Core pieces shared by the application: settings, logging, the catalog and serialization."""
