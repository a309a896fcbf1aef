"""Desktop front-end built on pygame."""
