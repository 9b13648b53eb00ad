"""Domain models — enums, the normalized request and the rendered document."""
