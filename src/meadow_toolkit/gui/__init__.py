"""PySide6 wizard front-end for the meadow assessment."""
