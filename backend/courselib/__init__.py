"""Course library API: paged, sortable, shapeable author resources."""
