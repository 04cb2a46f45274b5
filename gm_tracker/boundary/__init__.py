"""Persistence boundary: remote REST client, local database and the data gateway."""
