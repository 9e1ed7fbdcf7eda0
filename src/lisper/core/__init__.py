"""Lisper core: expression tree, language pipeline, errors, and configuration."""
