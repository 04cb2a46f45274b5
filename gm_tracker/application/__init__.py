"""Application layer: console use cases on top of the data gateway."""
