"""Shared test fixtures: factories, fakes and mixins."""
