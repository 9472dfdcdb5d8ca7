"""Application services wiring adapters into feature use cases."""
