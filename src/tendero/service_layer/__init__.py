"""Service layer: commands, handlers, the message bus and the checkout engine."""
