"""Backend for the image search metadata readers."""
