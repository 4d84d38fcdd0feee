"""Host adapters (raw terminal, Textual)."""
