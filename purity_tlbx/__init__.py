"""Pure-region toolbox: single-attribute class-pure intervals and easy/hard case splits."""
