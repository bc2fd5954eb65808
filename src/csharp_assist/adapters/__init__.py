"""Host adapters that render an editing session."""
