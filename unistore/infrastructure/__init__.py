"""Infrastructure layer: storage backends and their exceptions."""
