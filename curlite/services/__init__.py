"""Pure transforms between the argument model and the HTTP layer."""
