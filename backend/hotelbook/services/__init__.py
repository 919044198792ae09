"""Entity stores and derived views over the embedded database."""
