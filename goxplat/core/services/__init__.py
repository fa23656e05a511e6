"""Service layer — pure operations over the platform history."""
