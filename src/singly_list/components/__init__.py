"""Building blocks of the singly linked list."""
