"""Utilitaires XML transverses."""
