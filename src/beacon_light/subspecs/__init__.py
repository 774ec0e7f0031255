"""Subspecifications for the beacon light client primitives."""
