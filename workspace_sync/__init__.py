"""Reconcile workspace projects with their presence on the file system."""
