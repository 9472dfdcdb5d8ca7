"""Platform services shared across features (logging, filesystem helpers)."""
