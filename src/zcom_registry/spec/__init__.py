"""Request validation and response models."""
