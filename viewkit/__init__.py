"""Generic UI runtime: list windowing, range selection and frame scheduling."""
