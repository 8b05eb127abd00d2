"""Path search and word placement for the word path solver."""
